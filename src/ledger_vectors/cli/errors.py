"""
CLI Error Reporting
===================

Maps the package's exceptions onto messages and exit codes.

Two kinds of failure are kept apart:

- **Generation failures** (`LayoutError`, `SampleError`): a sample deploy
  or its screens could not be built. The whole batch is aborted, nothing
  is written, and the message names the offending sample.
- **Vector file failures** (`VectorFormatError`, failed validation): the
  file given to `preview` or `validate` is not a usable vector file.

| Exception | Message prefix | Exit code |
|-----------|----------------|-----------|
| `LayoutError` | `Layout error:` | GENERATION_ERROR |
| `SampleError` | `Sample error:` | GENERATION_ERROR |
| `VectorFormatError` | `Invalid vector file:` | INVALID_VECTOR_FILE |
| `click.BadParameter`, missing or unreadable files | `Error:` | INVALID_ARGS |
| anything else | `Internal error:` | INTERNAL_ERROR |
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from ledger_vectors.errors import (
    LayoutError,
    LedgerVectorsError,
    SampleError,
    VectorFormatError,
)


class ExitCode(IntEnum):
    """Exit codes of the ledger-vectors command."""
    SUCCESS = 0
    GENERATION_ERROR = 1      # A sample or its layout could not be built
    INVALID_ARGS = 2          # Bad option value, missing or unreadable file
    INTERNAL_ERROR = 3        # Unexpected internal error
    INVALID_VECTOR_FILE = 4   # Vector file unreadable or fails validation


# Most specific first.
_PACKAGE_ERRORS = (
    (VectorFormatError, "Invalid vector file", ExitCode.INVALID_VECTOR_FILE),
    (LayoutError, "Layout error", ExitCode.GENERATION_ERROR),
    (SampleError, "Sample error", ExitCode.GENERATION_ERROR),
    (LedgerVectorsError, "Error", ExitCode.GENERATION_ERROR),
)


def classify_error(error: LedgerVectorsError) -> tuple[str, ExitCode]:
    """Return the message prefix and exit code for a package error."""
    for error_class, prefix, code in _PACKAGE_ERRORS:
        if isinstance(error, error_class):
            return prefix, code
    return "Error", ExitCode.GENERATION_ERROR


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised by a command and exit.

    Args:
        error: The exception that was raised
        verbose: If True, print the traceback of internal errors

    Raises:
        SystemExit: Always, with the matching exit code
    """
    if isinstance(error, LedgerVectorsError):
        prefix, code = classify_error(error)
        click.echo(f"{prefix}: {error}", err=True)
        sys.exit(code)

    if isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
