"""
Ledger Vectors Command-Line Interface
=====================================

This package provides the `ledger-vectors` command:

- **generate**: write the test-vector JSON array
- **preview**: show the screens of one vector
- **validate**: check a vector file against the layout rules

Implemented as a Click-based CLI application.
"""

__all__ = ["vectors"]
