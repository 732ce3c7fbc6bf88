"""
View Assembler
==============

Builds the full list of display lines for a transaction, in either
regular or expert mode.

Every line is prefixed with the index of the element it belongs to,
counted among the elements visible in the chosen mode:

    0 | Type : Token transfer
    1 | To [1/2] : 0101010101010101010101010101010101
    1 | To [2/2] : 010101010101010101010101010101
    2 | Amount : CSPR 24.5
    3 | Id : 999

The mode is a plain enum; each mode has a renderer class that decides
which elements it shows.
"""

from enum import Enum
from typing import List, Optional, Sequence

from ledger_vectors.layout.elements import Element
from ledger_vectors.layout.pages import build_page, render_page


class ViewMode(Enum):
    """Device display profile."""
    REGULAR = "regular"
    EXPERT = "expert"


class ViewRenderer:
    """
    Renders a sequence of elements for one display mode.

    Subclasses only decide visibility; numbering and pagination are shared.
    """

    mode: ViewMode

    def includes(self, element: Element) -> bool:
        raise NotImplementedError

    def render(
        self,
        elements: Sequence[Element],
        label: Optional[str] = None,
    ) -> List[str]:
        """
        Render the visible elements as prefixed display lines.

        Args:
            elements: Elements in display order (not modified)
            label: Sample label, passed along for error messages

        Returns:
            Lines for all visible elements; empty if none is visible
        """
        output: List[str] = []
        visible = (element for element in elements if self.includes(element))
        for index, element in enumerate(visible):
            page = build_page(element, label=label)
            output.extend(f"{index} | {line}" for line in render_page(page))
        return output


class RegularRenderer(ViewRenderer):
    """Shows regular elements only."""

    mode = ViewMode.REGULAR

    def includes(self, element: Element) -> bool:
        return not element.expert


class ExpertRenderer(ViewRenderer):
    """Shows every element."""

    mode = ViewMode.EXPERT

    def includes(self, element: Element) -> bool:
        return True


_RENDERERS = {
    ViewMode.REGULAR: RegularRenderer(),
    ViewMode.EXPERT: ExpertRenderer(),
}


def renderer_for(mode: ViewMode) -> ViewRenderer:
    """Get the renderer for a display mode."""
    return _RENDERERS[mode]


def assemble(
    elements: Sequence[Element],
    mode: ViewMode,
    label: Optional[str] = None,
) -> List[str]:
    """
    Build the display lines of a transaction for the given mode.

    Example:
        >>> assemble([Element.regular("amount", "CSPR 24.5")], ViewMode.REGULAR)
        ['0 | Amount : CSPR 24.5']
    """
    return renderer_for(mode).render(elements, label=label)
