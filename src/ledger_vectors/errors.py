"""
Ledger Vectors Error Hierarchy
==============================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from LedgerVectorsError, allowing callers to catch
every generator-related error with a single except clause if desired.

Exception Hierarchy
-------------------
LedgerVectorsError (base)
├── LayoutError (display layout engine)
│   └── NameTooLongError - element label does not fit the name row
├── SampleError (sample transaction construction)
│   └── EncodingError - value cannot be serialized to bytes
└── VectorFormatError - test-vector file does not follow the output format

Design Philosophy
-----------------
Layout errors are fatal for the whole batch. A label that does not fit
the device's name row means the fixture itself is wrong, so the error
carries everything needed to find it (name, limit, sample label) instead
of producing a truncated screen.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LedgerVectorsError(Exception):
    """
    Base exception for all ledger_vectors errors.

        try:
            vectors = generate_vectors(config)
        except LedgerVectorsError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Layout Exceptions
# =============================================================================

class LayoutError(LedgerVectorsError):
    """Base exception for display layout errors."""
    pass


class NameTooLongError(LayoutError):
    """
    Element name exceeds the name row of the display.

    Raised by the page builder. The Ledger name row holds 11 characters;
    anything longer indicates a bug in the element extractor or a badly
    chosen label.

    Attributes:
        name: The offending element name
        limit: Maximum number of characters allowed
        label: Label of the sample being rendered (optional)
    """

    def __init__(self, name: str, limit: int, label: Optional[str] = None):
        self.name = name
        self.limit = limit
        self.label = label

        message = (
            f"name tag can only be {limit} characters, "
            f"got {len(name)}: '{name}'"
        )
        if label:
            message = f"{message} (sample '{label}')"
        super().__init__(message)


# =============================================================================
# Sample Exceptions
# =============================================================================

class SampleError(LedgerVectorsError):
    """
    Error constructing a sample transaction.

    Raised when:
    - A runtime argument has a value that does not match its CL type
    - A key or hash has the wrong length
    """
    pass


class EncodingError(SampleError):
    """
    Value cannot be serialized.

    Raised by the byte encoders when a value is out of range for its
    wire type (e.g. a negative U512).
    """
    pass


# =============================================================================
# Vector File Exceptions
# =============================================================================

class VectorFormatError(LedgerVectorsError):
    """
    Invalid test-vector file contents.

    Raised when reading a vector file that:
    - Is not a JSON array of objects
    - Misses one of the record keys
    - Contains an output line that is not "<index> | <name> : <value>"
    """

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
