"""
Value Chunker
=============

Splits an element value into screen-sized units.

A Ledger (Nano S) screen shows the element name on the first row and the
value on the two rows below it:

    Hash [1/2]
    0100101010101010
    1010101010101010

Each value row holds 17 characters, so one screen carries at most 34
characters of value. Longer values continue on the next screen. Characters
go to the top row first, then to the bottom row; nothing is reordered or
dropped, so joining all units gives back the original value.
"""

from dataclasses import dataclass
from typing import List


# Character limit for the "label" row.
NAME_ROW_CHAR_COUNT = 11
# Character limit for the value top row.
TOP_ROW_CHAR_COUNT = 17
# Character limit for the value bottom row.
BOTTOM_ROW_CHAR_COUNT = 17
# Characters of value that fit on a single screen.
UNIT_CHAR_COUNT = TOP_ROW_CHAR_COUNT + BOTTOM_ROW_CHAR_COUNT


@dataclass
class ValueUnit:
    """
    One screen's worth of value text.

    Attributes:
        top: Text of the top value row (at most 17 characters)
        bottom: Text of the bottom value row (at most 17 characters)
    """
    top: str = ""
    bottom: str = ""

    def add_char(self, char: str) -> bool:
        """
        Add a character to the unit.

        Tries the top row first, then the bottom row.

        Returns:
            True if the character was added, False if the unit is full
        """
        if len(self.top) < TOP_ROW_CHAR_COUNT:
            self.top += char
            return True
        if len(self.bottom) < BOTTOM_ROW_CHAR_COUNT:
            self.bottom += char
            return True
        return False

    @property
    def is_full(self) -> bool:
        return (len(self.top) == TOP_ROW_CHAR_COUNT
                and len(self.bottom) == BOTTOM_ROW_CHAR_COUNT)

    @property
    def text(self) -> str:
        """Both rows joined without a separator."""
        return self.top + self.bottom

    def __str__(self) -> str:
        return self.text


def chunk_value(value: str) -> List[ValueUnit]:
    """
    Split a value into consecutive screen units.

    Always returns at least one unit: an empty value yields a single
    empty unit.

    Example:
        >>> [u.text for u in chunk_value("ab")]
        ['ab']
        >>> len(chunk_value("0" * 35))
        2
    """
    units: List[ValueUnit] = []
    current = ValueUnit()
    for char in value:
        if not current.add_char(char):
            # Screen is full, continue on a fresh one.
            units.append(current)
            current = ValueUnit()
            current.add_char(char)
    units.append(current)
    return units
