"""
Labeled Samples
===============

A sample wraps a value (a runtime-args set, an executable item or a whole
deploy) together with a human-readable label and a validity bit. Labels
are built up as samples are combined, so the final deploy label reads
like "native_transfer-target_bytes-amount_max-payment_system".
"""

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")

LABEL_SEPARATOR = "-"


@dataclass
class Sample(Generic[T]):
    """
    A labeled test sample.

    Attributes:
        label: Human-readable description of the sample
        value: The sampled object
        valid: Whether the device should accept the sample
    """
    label: str
    value: T
    valid: bool

    def add_label(self, extra: str) -> None:
        """Append a label part."""
        self.label = join_labels(self.label, extra)

    def prepend_label(self, prefix: str) -> None:
        """Prepend a label part."""
        self.label = join_labels(prefix, self.label)

    def destructure(self) -> Tuple[str, T, bool]:
        return self.label, self.value, self.valid


def join_labels(*parts: str) -> str:
    """Join non-empty label parts."""
    return LABEL_SEPARATOR.join(part for part in parts if part)
