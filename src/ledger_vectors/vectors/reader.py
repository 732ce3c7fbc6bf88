"""
Test Vector Reader
==================

Reads test-vector files back and checks them against the display layout
rules. Useful for vector files edited by hand or produced by another
generator.

Checks
------
- Every output line is "<index> | <name> : <value>" or
  "<index> | <name> [<page>/<count>] : <value>"
- Element indexes start at 0 and grow by exactly 1 per element
- Names fit the 11-character name row
- Values fit one screen (34 characters); only the last page is short
- Page numbers run from 1 to count without gaps
- The blob is lowercase hex
- Regular-mode elements appear, in order, in the expert output (warning)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
import json
import re

from ledger_vectors.errors import VectorFormatError
from ledger_vectors.layout.chunker import NAME_ROW_CHAR_COUNT, UNIT_CHAR_COUNT
from ledger_vectors.vectors.record import TestVector

LINE_PATTERN = re.compile(
    r"^(?P<index>\d+) \| (?P<name>.*?)(?: \[(?P<page>\d+)/(?P<count>\d+)\])? : (?P<value>.*)$"
)
HEX_PATTERN = re.compile(r"^(?:[0-9a-f]{2})*$")

RECORD_KEYS = (
    "index", "name", "valid_regular", "valid_expert",
    "testnet", "blob", "output", "output_expert",
)


@dataclass(frozen=True)
class RenderedLine:
    """
    One parsed display line.

    Attributes:
        element_index: Index prefix of the line
        name: Element name
        page: 1-based page number (1 for unnumbered lines)
        page_count: Number of pages of the element (1 for unnumbered lines)
        value: Value text shown on this page
        numbered: Whether the line carried a "[page/count]" marker
    """
    element_index: int
    name: str
    page: int
    page_count: int
    value: str
    numbered: bool = False


def parse_line(line: str) -> RenderedLine:
    """
    Parse a display line.

    Example:
        >>> parse_line("1 | To [2/2] : 01")
        RenderedLine(element_index=1, name='To', page=2, page_count=2, value='01', numbered=True)

    Raises:
        VectorFormatError: If the line does not follow the display format
    """
    match = LINE_PATTERN.match(line)
    if not match:
        raise VectorFormatError("malformed display line", line=line)

    numbered = match.group("page") is not None
    return RenderedLine(
        element_index=int(match.group("index")),
        name=match.group("name"),
        page=int(match.group("page")) if numbered else 1,
        page_count=int(match.group("count")) if numbered else 1,
        value=match.group("value"),
        numbered=numbered,
    )


# =============================================================================
# Loading
# =============================================================================

def vector_from_dict(data: Dict[str, Any]) -> TestVector:
    if not isinstance(data, dict):
        raise VectorFormatError(f"record must be an object, got {type(data).__name__}")
    missing = [key for key in RECORD_KEYS if key not in data]
    if missing:
        raise VectorFormatError(f"record is missing keys: {', '.join(missing)}")
    return TestVector(**{key: data[key] for key in RECORD_KEYS})


def load_vectors(source: Union[str, Path]) -> List[TestVector]:
    """
    Load a test-vector JSON file.

    Raises:
        VectorFormatError: If the file is not a JSON array of records
    """
    try:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise VectorFormatError(f"invalid JSON in {source}: {e}") from e
    if not isinstance(data, list):
        raise VectorFormatError(f"{source} must contain a JSON array")
    return [vector_from_dict(item) for item in data]


# =============================================================================
# Validation
# =============================================================================

@dataclass
class ValidationReport:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def group_elements(lines: List[RenderedLine]) -> List[List[RenderedLine]]:
    """Split consecutive lines into per-element groups."""
    groups: List[List[RenderedLine]] = []
    for line in lines:
        if groups and groups[-1][0].element_index == line.element_index:
            groups[-1].append(line)
        else:
            groups.append([line])
    return groups


def _check_group(group: List[RenderedLine], where: str, report: ValidationReport) -> None:
    first = group[0]
    if len(first.name) > NAME_ROW_CHAR_COUNT:
        report.errors.append(
            f"{where}: name '{first.name}' exceeds {NAME_ROW_CHAR_COUNT} characters"
        )

    for line in group:
        if line.name != first.name:
            report.errors.append(f"{where}: name changes from '{first.name}' to '{line.name}'")
        if len(line.value) > UNIT_CHAR_COUNT:
            report.errors.append(
                f"{where}: value of '{line.name}' exceeds {UNIT_CHAR_COUNT} characters"
            )

    if len(group) == 1 and not first.numbered:
        return

    expected = list(range(1, len(group) + 1))
    if any(not line.numbered for line in group):
        report.errors.append(f"{where}: '{first.name}' mixes numbered and plain pages")
        return
    if [line.page for line in group] != expected:
        report.errors.append(f"{where}: '{first.name}' pages are not numbered 1..{len(group)}")
    if any(line.page_count != len(group) for line in group):
        report.errors.append(f"{where}: '{first.name}' page count does not match {len(group)}")
    if len(group) == 1:
        report.errors.append(f"{where}: single-page '{first.name}' must not be numbered")
    for line in group[:-1]:
        if len(line.value) != UNIT_CHAR_COUNT:
            report.errors.append(f"{where}: page {line.page} of '{first.name}' is not full")


def _check_output(lines: List[str], mode: str,
                  report: ValidationReport) -> List[Tuple[str, str]]:
    """Validate one output list; return (name, value) per element."""
    parsed = []
    for line in lines:
        try:
            parsed.append(parse_line(line))
        except VectorFormatError as e:
            report.errors.append(f"{mode}: {e}")

    elements = []
    for expected_index, group in enumerate(group_elements(parsed)):
        where = f"{mode} element {group[0].element_index}"
        if group[0].element_index != expected_index:
            report.errors.append(
                f"{where}: expected index {expected_index}"
            )
        _check_group(group, where, report)
        elements.append((group[0].name, "".join(line.value for line in group)))
    return elements


def _is_subsequence(needle: List[Tuple[str, str]], haystack: List[Tuple[str, str]]) -> bool:
    remaining = iter(haystack)
    return all(item in remaining for item in needle)


def validate_vector(vector: TestVector) -> ValidationReport:
    """Check a single vector against the layout rules."""
    report = ValidationReport()

    if not HEX_PATTERN.match(vector.blob):
        report.errors.append("blob is not lowercase hex")

    regular = _check_output(vector.output, "output", report)
    expert = _check_output(vector.output_expert, "output_expert", report)

    if not _is_subsequence(regular, expert):
        report.warnings.append("regular elements are not all shown in expert mode")
    if vector.valid_regular != vector.valid_expert:
        report.warnings.append("valid_regular and valid_expert differ")
    return report
