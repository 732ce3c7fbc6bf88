"""
Ledger Display Layout
=====================

Fixed-width pagination of transaction elements for the Ledger's
two-row value display.

This package provides:
- **Element**: one labeled value with its visibility tier
- **chunk_value**: split a value into 2 × 17 character screen units
- **build_page / render_page**: number the screens of one element
- **assemble**: render all elements for regular or expert mode

Quick Start
-----------
    >>> from ledger_vectors.layout import Element, ViewMode, assemble
    >>> elements = [
    ...     Element.regular("amount", "CSPR 24.5"),
    ...     Element.expert_only("id", "999"),
    ... ]
    >>> assemble(elements, ViewMode.REGULAR)
    ['0 | Amount : CSPR 24.5']
    >>> assemble(elements, ViewMode.EXPERT)
    ['0 | Amount : CSPR 24.5', '1 | Id : 999']
"""

from ledger_vectors.layout.chunker import (
    NAME_ROW_CHAR_COUNT,
    TOP_ROW_CHAR_COUNT,
    BOTTOM_ROW_CHAR_COUNT,
    UNIT_CHAR_COUNT,
    ValueUnit,
    chunk_value,
)
from ledger_vectors.layout.elements import Element, capitalize_first
from ledger_vectors.layout.pages import Page, build_page, render_page
from ledger_vectors.layout.views import (
    ViewMode,
    ViewRenderer,
    RegularRenderer,
    ExpertRenderer,
    renderer_for,
    assemble,
)

__all__ = [
    # Constants
    "NAME_ROW_CHAR_COUNT",
    "TOP_ROW_CHAR_COUNT",
    "BOTTOM_ROW_CHAR_COUNT",
    "UNIT_CHAR_COUNT",
    # Chunker
    "ValueUnit",
    "chunk_value",
    # Elements
    "Element",
    "capitalize_first",
    # Pages
    "Page",
    "build_page",
    "render_page",
    # Views
    "ViewMode",
    "ViewRenderer",
    "RegularRenderer",
    "ExpertRenderer",
    "renderer_for",
    "assemble",
]
