"""
Test Vectors
============

Builds, serializes and reads back the JSON test vectors.

This package provides:
- **TestVector**: one record of the vector file
- **build_record / build_vector / build_vectors**: render deploys into records
- **generate_vectors**: the whole batch from the sample generator
- **vectors_to_json**: the pretty-printed JSON array
- **load_vectors / validate_vector**: read and check existing files
"""

from ledger_vectors.vectors.record import (
    TestVector,
    build_record,
    build_vector,
    build_vectors,
    generate_vectors,
    vectors_to_json,
)
from ledger_vectors.vectors.reader import (
    RenderedLine,
    ValidationReport,
    parse_line,
    group_elements,
    vector_from_dict,
    load_vectors,
    validate_vector,
)

__all__ = [
    # Records
    "TestVector",
    "build_record",
    "build_vector",
    "build_vectors",
    "generate_vectors",
    "vectors_to_json",
    # Reader
    "RenderedLine",
    "ValidationReport",
    "parse_line",
    "group_elements",
    "vector_from_dict",
    "load_vectors",
    "validate_vector",
]
