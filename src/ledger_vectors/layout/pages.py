"""
Page Builder
============

Turns one element into the screens the device will show for it.

An element whose value fits on one screen renders as a single line:

    Amount : CSPR 24.5

Longer values are numbered, one line per screen:

    To [1/2] : 0101010101010101010101010101010101
    To [2/2] : 01
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ledger_vectors.errors import NameTooLongError
from ledger_vectors.layout.chunker import NAME_ROW_CHAR_COUNT, ValueUnit, chunk_value
from ledger_vectors.layout.elements import Element


@dataclass
class Page:
    """
    Paginated view of a single element.

    Attributes:
        name: Name of the panel, like hash, chain name, sender
        expert: Whether the element is for expert mode only
        units: Value units, one per screen (never empty)
    """
    name: str
    expert: bool = False
    units: List[ValueUnit] = field(default_factory=lambda: [ValueUnit()])

    @property
    def page_count(self) -> int:
        return len(self.units)


def build_page(element: Element, label: Optional[str] = None) -> Page:
    """
    Chop an element's value into screen units.

    Args:
        element: The element to paginate
        label: Sample label, only used to make errors easier to trace

    Returns:
        Page holding the element's name, tier and value units

    Raises:
        NameTooLongError: If the name does not fit the 11-character name row
    """
    if len(element.name) > NAME_ROW_CHAR_COUNT:
        raise NameTooLongError(element.name, NAME_ROW_CHAR_COUNT, label=label)

    return Page(
        name=element.name,
        expert=element.expert,
        units=chunk_value(element.value),
    )


def render_page(page: Page) -> List[str]:
    """Render a page as printable lines, adding page numbers when needed."""
    total = page.page_count
    if total == 1:
        return [f"{page.name} : {page.units[0]}"]

    return [
        f"{page.name} [{number}/{total}] : {unit}"
        for number, unit in enumerate(page.units, start=1)
    ]
