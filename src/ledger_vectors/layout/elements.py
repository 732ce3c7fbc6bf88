"""
Display Elements
================

An element is one labeled fact of a transaction, as it will be shown on
the Ledger screen: a short name (`Amount`, `Target`, ...), its value
already converted to text, and the visibility tier.

Regular elements appear in both views. Expert elements only appear when
the device is in expert mode.
"""

from dataclasses import dataclass


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


@dataclass
class Element:
    """
    A single element of the transaction to be displayed on the device.

    Attributes:
        name: Label of the element, e.g. "From", "To", "Amount"
        value: Text to display for the element
        expert: Whether the element is shown in expert mode only
    """
    name: str
    value: str
    expert: bool = False

    @classmethod
    def regular(cls, name: str, value: str) -> "Element":
        """Create an element shown in both regular and expert mode."""
        return cls(capitalize_first(name), value, expert=False)

    @classmethod
    def expert_only(cls, name: str, value: str) -> "Element":
        """Create an element shown in expert mode only."""
        return cls(capitalize_first(name), value, expert=True)

    def as_expert(self) -> None:
        """Promote the element to expert-only visibility."""
        self.expert = True
