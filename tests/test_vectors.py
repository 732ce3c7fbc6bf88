"""
Test Vector Unit Tests
======================

Tests for building, serializing, reading and validating test vectors.

Test Categories
---------------
1. Records: Record fields, blob encoding and validity flags
2. JSON: Serialized layout of the vector array
3. Reader: Display line parsing and vector file loading
4. Validation: Layout checks on existing vectors
5. Generation: Whole-batch generation
"""

import json
from random import Random

import pytest

from ledger_vectors.config import GeneratorConfig
from ledger_vectors.errors import NameTooLongError, VectorFormatError
from ledger_vectors.layout import Element
from ledger_vectors.samples import payment, transfer
from ledger_vectors.samples.generator import construct_samples
from ledger_vectors.vectors import (
    RenderedLine,
    TestVector,
    build_record,
    build_vector,
    build_vectors,
    generate_vectors,
    group_elements,
    load_vectors,
    parse_line,
    validate_vector,
    vector_from_dict,
    vectors_to_json,
)
from ledger_vectors.vectors.reader import RECORD_KEYS


@pytest.fixture
def record(mixed_elements):
    return build_record(3, "sample-label", True, b"\xde\xad\xbe\xef", mixed_elements)


# =============================================================================
# Record Tests
# =============================================================================

class TestRecord:
    """Test record building."""

    def test_fields(self, record):
        assert record.index == 3
        assert record.name == "sample-label"
        assert record.blob == "deadbeef"
        assert record.testnet is True

    def test_both_views(self, record):
        """Regular output is a filtered, re-indexed expert output."""
        assert record.output[0] == "0 | Type : Token transfer"
        assert record.output_expert[1] == "1 | Chain ID : casper-test"
        assert len(record.output) == 4
        assert len(record.output_expert) == 6

    def test_single_validity_flag(self):
        invalid = build_record(0, "x", False, b"", [])
        assert invalid.valid_regular is False
        assert invalid.valid_expert is False

    def test_separate_expert_validity(self):
        vector = build_record(0, "x", True, b"", [], valid_expert=False)
        assert vector.valid_regular is True
        assert vector.valid_expert is False

    def test_empty_blob_and_elements(self):
        vector = build_record(0, "empty", True, b"", [])
        assert vector.blob == ""
        assert vector.output == []
        assert vector.output_expert == []

    def test_network_flag(self):
        assert build_record(0, "x", True, b"", [], testnet=False).testnet is False

    def test_name_error_carries_label(self):
        """A bad name aborts the record and names the sample."""
        elements = [Element.regular("delegation amount", "1")]
        with pytest.raises(NameTooLongError) as exc_info:
            build_record(0, "delegate-amount_min", True, b"", elements)
        assert exc_info.value.label == "delegate-amount_min"

    def test_build_vector_from_sample(self, seeded_config):
        sample = construct_samples(
            Random(0), transfer.valid()[:1],
            [payment.invalid()], seeded_config,
        )[0]
        vector = build_vector(7, sample, seeded_config)
        assert vector.index == 7
        assert vector.name == sample.label
        assert vector.valid_regular is False
        assert vector.blob == sample.value.to_bytes().hex()

    def test_build_vectors_indexes(self, seeded_config):
        sessions = transfer.valid()[:3]
        samples = construct_samples(
            Random(0), sessions, [payment.valid()], seeded_config,
        )
        vectors = build_vectors(samples, seeded_config)
        assert [v.index for v in vectors] == [0, 1, 2]
        assert [v.name for v in vectors] == [s.label for s in samples]

    def test_not_collected_by_pytest(self):
        assert TestVector.__test__ is False


# =============================================================================
# JSON Tests
# =============================================================================

class TestJson:
    """Test JSON serialization."""

    def test_key_order(self, record):
        assert list(record.to_dict()) == list(RECORD_KEYS)
        assert list(RECORD_KEYS) == [
            "index", "name", "valid_regular", "valid_expert",
            "testnet", "blob", "output", "output_expert",
        ]

    def test_pretty_array(self, record):
        text = vectors_to_json([record])
        assert text.startswith("[\n  {\n    \"index\": 3,")
        data = json.loads(text)
        assert data == [record.to_dict()]

    def test_empty_array(self):
        assert json.loads(vectors_to_json([])) == []

    def test_round_trip_through_reader(self, record):
        data = json.loads(vectors_to_json([record]))
        assert vector_from_dict(data[0]) == record


# =============================================================================
# Reader Tests
# =============================================================================

class TestReader:
    """Test display line parsing and file loading."""

    def test_parse_plain_line(self):
        line = parse_line("2 | Amount : CSPR 24.5")
        assert line == RenderedLine(2, "Amount", 1, 1, "CSPR 24.5", numbered=False)

    def test_parse_numbered_line(self):
        line = parse_line("1 | Txn hash [2/2] : ab")
        assert line.name == "Txn hash"
        assert (line.page, line.page_count) == (2, 2)
        assert line.numbered is True

    def test_parse_value_with_colon(self):
        """Only the first ' : ' separates name and value."""
        line = parse_line("5 | Arg-0 : note: a : b")
        assert line.name == "Arg-0"
        assert line.value == "note: a : b"

    def test_parse_empty_value(self):
        assert parse_line("0 | Memo : ").value == ""

    def test_parse_empty_name(self):
        line = parse_line("0 |  : abc")
        assert line.name == ""
        assert line.value == "abc"

    @pytest.mark.parametrize("text", [
        "Amount : 5",
        "x | Amount : 5",
        "0 | Amount 5",
        "",
    ])
    def test_malformed_line(self, text):
        with pytest.raises(VectorFormatError):
            parse_line(text)

    def test_group_elements(self):
        lines = [parse_line(t) for t in (
            "0 | A [1/2] : x", "0 | A [2/2] : y", "1 | B : z",
        )]
        groups = group_elements(lines)
        assert [len(g) for g in groups] == [2, 1]

    def test_load_vectors(self, tmp_path, record):
        path = tmp_path / "vectors.json"
        path.write_text(vectors_to_json([record]), encoding="utf-8")
        assert load_vectors(path) == [record]

    def test_load_not_array(self, tmp_path):
        path = tmp_path / "vectors.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(VectorFormatError):
            load_vectors(path)

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "vectors.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(VectorFormatError):
            load_vectors(path)

    def test_missing_keys(self):
        with pytest.raises(VectorFormatError, match="blob"):
            vector_from_dict({key: None for key in RECORD_KEYS if key != "blob"})


# =============================================================================
# Validation Tests
# =============================================================================

def vector_with(output, output_expert=None, blob="00"):
    return TestVector(
        index=0, name="x", valid_regular=True, valid_expert=True, testnet=True,
        blob=blob, output=output,
        output_expert=list(output) if output_expert is None else output_expert,
    )


class TestValidation:
    """Test layout checks."""

    def test_built_record_is_valid(self, record):
        report = validate_vector(record)
        assert report.ok
        assert report.warnings == []

    def test_index_gap(self):
        report = validate_vector(vector_with(["0 | A : 1", "2 | B : 2"]))
        assert not report.ok
        assert any("expected index 1" in e for e in report.errors)

    def test_index_must_start_at_zero(self):
        report = validate_vector(vector_with(["1 | A : 1"]))
        assert not report.ok

    def test_name_too_long(self):
        report = validate_vector(vector_with(["0 | Much too long : 1"]))
        assert any("exceeds 11" in e for e in report.errors)

    def test_value_too_long(self):
        report = validate_vector(vector_with(["0 | A : " + "x" * 35]))
        assert any("exceeds 34" in e for e in report.errors)

    def test_short_middle_page(self):
        report = validate_vector(vector_with([
            "0 | A [1/2] : " + "x" * 30,
            "0 | A [2/2] : y",
        ]))
        assert any("not full" in e for e in report.errors)

    def test_page_numbering(self):
        report = validate_vector(vector_with([
            "0 | A [1/3] : " + "x" * 34,
            "0 | A [3/3] : y",
        ]))
        assert any("pages are not numbered" in e for e in report.errors)
        assert any("page count" in e for e in report.errors)

    def test_numbered_single_page(self):
        report = validate_vector(vector_with(["0 | A [1/1] : y"]))
        assert not report.ok

    def test_uppercase_blob(self):
        report = validate_vector(vector_with(["0 | A : 1"], blob="DEAD"))
        assert "blob is not lowercase hex" in report.errors

    def test_malformed_line_reported(self):
        report = validate_vector(vector_with(["garbage"]))
        assert not report.ok

    def test_regular_missing_from_expert(self):
        report = validate_vector(vector_with(["0 | A : 1"], output_expert=["0 | B : 2"]))
        assert report.ok
        assert report.warnings

    def test_empty_outputs(self):
        assert validate_vector(vector_with([])).ok

    def test_empty_name_accepted(self):
        """An element with an empty name renders and validates."""
        vector = build_record(
            0, "empty_name", True, b"\x00",
            [Element.regular("", "abc"), Element.regular("fee", "1")],
        )
        assert vector.output == ["0 |  : abc", "1 | Fee : 1"]
        report = validate_vector(vector)
        assert report.ok, report.errors


# =============================================================================
# Generation Tests
# =============================================================================

@pytest.fixture(scope="module")
def vectors():
    """Fixture: One seeded batch shared by the generation tests."""
    return generate_vectors(GeneratorConfig(seed=2021))


class TestGeneration:
    """Test whole-batch generation."""

    def test_indexes_sequential(self, vectors):
        assert [v.index for v in vectors] == list(range(len(vectors)))

    def test_every_vector_valid_layout(self, vectors):
        for vector in vectors:
            report = validate_vector(vector)
            assert report.ok, (vector.name, report.errors)
            assert report.warnings == [], (vector.name, report.warnings)

    def test_valid_and_invalid_present(self, vectors):
        assert any(v.valid_regular for v in vectors)
        assert any(not v.valid_regular for v in vectors)

    def test_testnet_from_config(self):
        vectors = generate_vectors(GeneratorConfig(seed=1, testnet=False))
        assert not any(v.testnet for v in vectors)

    def test_regular_shorter_than_expert(self, vectors):
        for vector in vectors:
            assert len(vector.output) < len(vector.output_expert)

    def test_transfer_screens(self, vectors):
        vector = next(v for v in vectors if v.name.startswith(
            "native_transfer-target_bytes-amount_mid-source_none-id_some"
        ))
        assert vector.output[0].startswith("0 | Txn hash [1/2] : ")
        assert vector.output[1].startswith("0 | Txn hash [2/2] : ")
        assert "1 | Type : Token transfer" in vector.output
        assert any(line.endswith(": CSPR 24.5") for line in vector.output)
        assert any("| Id : 999" in line for line in vector.output)
