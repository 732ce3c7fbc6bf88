"""
Ledger Vectors - Display Test Vectors for the Ledger Hardware Wallet
====================================================================

This package generates the test vectors used to check how a Ledger
hardware wallet displays deploys for review before signing.

A Ledger (Nano S) screen has a short name row and two 17-character value
rows. Every deploy is turned into a list of named elements, each element
is split over as many screens as its value needs, and the resulting lines
are recorded for both the regular and the expert display mode, next to
the raw deploy bytes.

Main Components
---------------
- **layout**: Display layout engine
    Chunks values into screens, numbers pages and assembles the
    regular and expert views

- **samples**: Sample deploys
    Native transfers, auction calls and generic contract calls, valid
    and invalid, with their byte encoding

- **extract**: Element extraction
    Turns a deploy into display elements in device order

- **vectors**: Test-vector records
    Builds, serializes, reads back and validates the JSON vector file

- **preview**: Screen preview
    Shows rendered lines as device screens (text or PNG)

Quick Start
-----------
Render elements:
    >>> from ledger_vectors import Element, ViewMode, assemble
    >>> assemble([Element.regular("amount", "CSPR 24.5")], ViewMode.REGULAR)
    ['0 | Amount : CSPR 24.5']

Generate the whole vector file:
    >>> from ledger_vectors import GeneratorConfig, generate_vectors, vectors_to_json
    >>> vectors = generate_vectors(GeneratorConfig(seed=42))
    >>> text = vectors_to_json(vectors)

Or use the command-line tool:
    $ ledger-vectors > manual.json
    $ ledger-vectors validate manual.json

Version History
---------------
1.0.0 - Initial release with layout engine, sample deploys and CLI
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ledger_vectors.errors import (
    LedgerVectorsError,
    LayoutError,
    NameTooLongError,
    SampleError,
    EncodingError,
    VectorFormatError,
)
from ledger_vectors.config import (
    GeneratorConfig,
    get_default_config,
    set_default_config,
)

# Layout engine
from ledger_vectors.layout import (
    NAME_ROW_CHAR_COUNT,
    TOP_ROW_CHAR_COUNT,
    BOTTOM_ROW_CHAR_COUNT,
    UNIT_CHAR_COUNT,
    Element,
    ValueUnit,
    Page,
    ViewMode,
    chunk_value,
    build_page,
    render_page,
    assemble,
)

# Element extraction
from ledger_vectors.extract import parse_deploy

# Test vectors
from ledger_vectors.vectors import (
    TestVector,
    build_record,
    build_vector,
    build_vectors,
    generate_vectors,
    vectors_to_json,
    load_vectors,
    validate_vector,
)

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "LedgerVectorsError",
    "LayoutError",
    "NameTooLongError",
    "SampleError",
    "EncodingError",
    "VectorFormatError",
    # Configuration
    "GeneratorConfig",
    "get_default_config",
    "set_default_config",
    # Layout
    "NAME_ROW_CHAR_COUNT",
    "TOP_ROW_CHAR_COUNT",
    "BOTTOM_ROW_CHAR_COUNT",
    "UNIT_CHAR_COUNT",
    "Element",
    "ValueUnit",
    "Page",
    "ViewMode",
    "chunk_value",
    "build_page",
    "render_page",
    "assemble",
    # Extraction
    "parse_deploy",
    # Vectors
    "TestVector",
    "build_record",
    "build_vector",
    "build_vectors",
    "generate_vectors",
    "vectors_to_json",
    "load_vectors",
    "validate_vector",
]
