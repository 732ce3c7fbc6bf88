"""
ledger-vectors - Test Vector Generator Command-Line Interface
=============================================================

This module implements the command-line interface of the generator.
Run without a command, it behaves like `generate`: it builds every
sample deploy and prints the test-vector JSON array to stdout.

Commands
--------
- **generate**: Build the vectors and write the JSON array
- **preview**: Show the screens of one vector from a vector file
- **validate**: Check a vector file against the display layout rules

Usage Examples
--------------
Print the vectors:
    $ ledger-vectors > manual.json

Reproducible run written to a file:
    $ ledger-vectors generate --seed 42 -o manual.json

Look at the expert-mode screens of vector 12:
    $ ledger-vectors preview manual.json --index 12 --expert

Save those screens as images:
    $ ledger-vectors preview manual.json -i 12 --png-dir screens/

Check a vector file:
    $ ledger-vectors validate manual.json

Exit Codes
----------
0 - Success
1 - Generation error (layout or sample), nothing written
2 - Invalid arguments
3 - Internal error
4 - Invalid vector file, or the file fails validation
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ledger_vectors import __version__
from ledger_vectors.cli.errors import ExitCode, handle_cli_exception
from ledger_vectors.config import GeneratorConfig
from ledger_vectors.preview import format_screen, render_screen_png, screens_from_lines
from ledger_vectors.vectors import (
    generate_vectors,
    load_vectors,
    validate_vector,
    vectors_to_json,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores common options like verbosity.
    """

    def __init__(self) -> None:
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity. Logs go to stderr."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group(invoke_without_command=True)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="ledger-vectors")
@click.pass_context
def main(click_ctx: click.Context, verbose: bool) -> None:
    """
    Test-vector generator for the Ledger transaction display.

    Renders sample deploys into the exact screens the device shows in
    regular and expert mode, and emits them as a JSON array.

    \b
    Commands:
      generate  Write the test vectors (default)
      preview   Show the screens of one vector
      validate  Check a vector file
    """
    ctx = click_ctx.ensure_object(Context)
    ctx.verbose = verbose
    ctx.setup_logging()

    if click_ctx.invoked_subcommand is None:
        click_ctx.invoke(cmd_generate)


# =============================================================================
# Generate Command
# =============================================================================

@main.command("generate")
@click.option(
    "-s", "--seed",
    type=int,
    default=None,
    help="Seed for the sample shuffles (default: random)",
)
@click.option(
    "--chain-name",
    type=str,
    default=None,
    help="Chain name written into the deploys (default: mainnet)",
)
@click.option(
    "--mainnet",
    is_flag=True,
    help="Clear the records' testnet flag",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: stdout)",
)
@pass_context
def cmd_generate(
    ctx: Context,
    seed: Optional[int],
    chain_name: Optional[str],
    mainnet: bool,
    output: Optional[Path],
) -> None:
    """
    Generate the test vectors.

    \b
    Examples:
      ledger-vectors generate > manual.json
      ledger-vectors generate --seed 42 -o manual.json
    """
    try:
        config = GeneratorConfig.from_env()
        if seed is not None:
            config.seed = seed
        if chain_name is not None:
            config.chain_name = chain_name
        if mainnet:
            config.testnet = False

        # Build everything before writing, so a failure leaves no partial file.
        vectors = generate_vectors(config)
        text = vectors_to_json(vectors, indent=config.json_indent)

        if output is None:
            click.echo(text)
        else:
            output.write_text(text + "\n", encoding="utf-8")
            logger.info("Wrote %d vectors to %s", len(vectors), output)

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Preview Command
# =============================================================================

@main.command("preview")
@click.argument(
    "vectors_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-i", "--index",
    type=int,
    default=0,
    help="Index of the vector to show (default: 0)",
)
@click.option(
    "--expert",
    is_flag=True,
    help="Show the expert-mode screens",
)
@click.option(
    "--png-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also write each screen as a PNG image into this directory",
)
@pass_context
def cmd_preview(
    ctx: Context,
    vectors_file: Path,
    index: int,
    expert: bool,
    png_dir: Optional[Path],
) -> None:
    """
    Show the screens of one vector.

    \b
    Example:
      ledger-vectors preview manual.json --index 3 --expert
    """
    try:
        vectors = {vector.index: vector for vector in load_vectors(vectors_file)}
        if index not in vectors:
            raise click.BadParameter(
                f"no vector with index {index} in {vectors_file}",
                param_hint="--index",
            )
        vector = vectors[index]
        mode = "expert" if expert else "regular"
        screens = screens_from_lines(vector.output_expert if expert else vector.output)

        click.echo(f"Vector {vector.index}: {vector.name} ({mode}, {len(screens)} screens)")
        for screen in screens:
            click.echo(format_screen(screen))

        if png_dir is not None:
            png_dir.mkdir(parents=True, exist_ok=True)
            for number, screen in enumerate(screens):
                image = render_screen_png(screen)
                if image is None:
                    click.echo("Warning: Pillow is not installed, no images written", err=True)
                    break
                path = png_dir / f"{vector.index:04d}_{mode}_{number:03d}.png"
                path.write_bytes(image)
            else:
                click.echo(f"Wrote {len(screens)} images to {png_dir}")

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument(
    "vectors_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def cmd_validate(ctx: Context, vectors_file: Path) -> None:
    """
    Validate a test-vector file.

    \b
    Checks:
    - Display line format and element numbering
    - Name and value widths, page numbering
    - Blob encoding
    - Expert output includes the regular output

    \b
    Example:
      ledger-vectors validate manual.json
    """
    try:
        vectors = load_vectors(vectors_file)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    error_count = 0
    warning_count = 0
    for position, vector in enumerate(vectors):
        if vector.index != position:
            click.echo(f"  WARNING: [{position}] index field is {vector.index}")
            warning_count += 1
        report = validate_vector(vector)
        for error in report.errors:
            click.echo(f"  ERROR: [{vector.index}] {error}")
        for warning in report.warnings:
            click.echo(f"  WARNING: [{vector.index}] {warning}")
        error_count += len(report.errors)
        warning_count += len(report.warnings)
        if ctx.verbose and report.ok:
            click.echo(f"  [{vector.index}] {vector.name}: OK")

    if error_count:
        click.echo(f"Validation FAILED: {error_count} errors, {warning_count} warnings")
        sys.exit(ExitCode.INVALID_VECTOR_FILE)
    if warning_count:
        click.echo(f"Validation passed with {warning_count} warnings: {vectors_file}")
    else:
        click.echo(f"Validation PASSED: {vectors_file} ({len(vectors)} vectors)")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
