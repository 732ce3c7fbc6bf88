"""
Element Extraction Tests
========================

Tests for turning deploys into display elements.

Test Categories
---------------
1. Formatting: Motes, TTLs, timestamps and CL values
2. Header: Header and payment elements
3. Sessions: Transfer, auction and generic session elements
"""

import pytest

from ledger_vectors.extract import (
    format_cl_value,
    format_motes,
    format_target,
    format_timestamp,
    format_ttl,
    parse_deploy,
    session_type,
)
from ledger_vectors.samples import (
    CLValue,
    Deploy,
    ExecutableItem,
    PublicKey,
    RuntimeArgs,
    URef,
)
from ledger_vectors.samples import auction, payment, transfer
from ledger_vectors.samples.bytesrepr import U512_MAX


def make_deploy(session, payment_item=None, dependencies=()):
    return Deploy.new(
        timestamp_ms=1_620_138_035_104,
        ttl_ms=3_600_000,
        gas_price=2,
        dependencies=list(dependencies),
        chain_name="mainnet",
        payment=payment_item or payment.valid().value,
        session=session,
        account=PublicKey.ed25519(bytes([16] * 32)),
    )


def names(elements):
    return [element.name for element in elements]


def by_name(elements):
    return {element.name: element for element in elements}


# =============================================================================
# Formatting Tests
# =============================================================================

class TestFormatting:
    """Test value formatting."""

    @pytest.mark.parametrize("motes,expected", [
        (0, "CSPR 0"),
        (1, "CSPR 0.000000001"),
        (1_000_000_000, "CSPR 1"),
        (2_500_000_000, "CSPR 2.5"),
        (24_500_000_000, "CSPR 24.5"),
        (100_000_000, "CSPR 0.1"),
    ])
    def test_format_motes(self, motes, expected):
        assert format_motes(motes) == expected

    def test_format_motes_huge(self):
        """The largest U512 keeps every digit."""
        text = format_motes(U512_MAX)
        whole, fraction = text[len("CSPR "):].split(".")
        assert int(whole + fraction) == U512_MAX

    @pytest.mark.parametrize("ttl_ms,expected", [
        (0, "0s"),
        (60_000, "1m"),
        (3_600_000, "1h"),
        (86_400_000, "1day"),
        (5_400_000, "1h 30m"),
        (1_500, "1s 500ms"),
    ])
    def test_format_ttl(self, ttl_ms, expected):
        assert format_ttl(ttl_ms) == expected

    def test_format_timestamp(self):
        assert format_timestamp(1_620_138_035_104) == "2021-05-04T14:20:35.104Z"
        assert format_timestamp(0) == "1970-01-01T00:00:00.000Z"

    def test_format_option(self):
        assert format_cl_value(CLValue.option_u64(None)) == "None"
        assert format_cl_value(CLValue.option_u64(999)) == "999"

    def test_format_keys(self):
        key = PublicKey.ed25519(bytes([3] * 32))
        assert format_cl_value(CLValue.public_key(key)) == "01" + "03" * 32
        uref = URef(bytes([2] * 32))
        assert format_cl_value(CLValue.uref(uref)) == "uref-" + "02" * 32 + "-007"

    def test_format_target_bytes(self):
        """A raw 32-byte target is shown as an account hash."""
        value = CLValue.byte_array(bytes([255] * 32))
        assert format_target(value) == "account-hash-" + "ff" * 32
        assert format_cl_value(value) == "ff" * 32


# =============================================================================
# Header Tests
# =============================================================================

class TestHeaderElements:
    """Test header and payment elements."""

    def test_header_order_and_tiers(self):
        deploy = make_deploy(transfer.valid()[0].value, dependencies=[bytes([7] * 32)])
        elements = parse_deploy(deploy)
        assert names(elements)[:10] == [
            "Txn hash", "Type", "Chain ID", "Account", "Timestamp",
            "Ttl", "Gas price", "Deps #", "Dep-0", "Fee",
        ]
        tiers = {element.name: element.expert for element in elements[:10]}
        assert tiers == {
            "Txn hash": False, "Type": False, "Chain ID": True, "Account": False,
            "Timestamp": True, "Ttl": True, "Gas price": True, "Deps #": True,
            "Dep-0": True, "Fee": False,
        }

    def test_header_values(self):
        deploy = make_deploy(transfer.valid()[0].value)
        elements = by_name(parse_deploy(deploy))
        assert elements["Txn hash"].value == deploy.hash.hex()
        assert elements["Chain ID"].value == "mainnet"
        assert elements["Account"].value == "01" + "10" * 32
        assert elements["Timestamp"].value == "2021-05-04T14:20:35.104Z"
        assert elements["Ttl"].value == "1h"
        assert elements["Gas price"].value == "2"
        assert elements["Deps #"].value == "0"
        assert elements["Fee"].value == "CSPR 2.5"

    def test_payment_without_amount(self):
        """A payment without amount lists its arguments instead of a fee."""
        deploy = make_deploy(transfer.valid()[0].value, payment.invalid().value)
        elements = by_name(parse_deploy(deploy))
        assert "Fee" not in elements
        assert elements["Payment"].value == "system"
        assert elements["Pay arg-0"].value == "quantity: 2"
        assert elements["Pay arg-0"].expert is True


# =============================================================================
# Session Tests
# =============================================================================

class TestSessionElements:
    """Test session-specific elements."""

    def test_transfer_with_source_and_id(self):
        args = transfer.transfer_args(
            CLValue.public_key(PublicKey.ed25519(bytes([3] * 32))),
            24_500_000_000, 999, with_source=True,
        )
        elements = parse_deploy(make_deploy(ExecutableItem.transfer(args)))
        assert names(elements)[-4:] == ["Target", "Amount", "Source", "Id"]
        tail = by_name(elements)
        assert tail["Amount"].value == "CSPR 24.5"
        assert tail["Source"].expert is True
        assert tail["Id"].value == "999"
        assert tail["Id"].expert is False
        assert tail["Type"].value == "Token transfer"

    def test_transfer_without_id_is_expert(self):
        args = transfer.transfer_args(CLValue.byte_array(bytes(32)), 1, None, False)
        elements = by_name(parse_deploy(make_deploy(ExecutableItem.transfer(args))))
        assert "Source" not in elements
        assert elements["Id"].value == "None"
        assert elements["Id"].expert is True

    def test_transfer_missing_target(self):
        """Missing arguments are simply not shown."""
        sample = next(s for s in transfer.invalid() if s.label.endswith("missing_target"))
        elements = by_name(parse_deploy(make_deploy(sample.value)))
        assert "Target" not in elements
        assert "Amount" in elements

    def test_transfer_wrong_amount_type(self):
        """Non-U512 amounts are shown as plain numbers."""
        sample = next(s for s in transfer.invalid() if s.label.endswith("invalid_type_amount"))
        elements = by_name(parse_deploy(make_deploy(sample.value)))
        assert elements["Amount"].value == "100000"

    def test_delegate(self):
        session = auction.valid(auction.DELEGATE)[2].value
        elements = parse_deploy(make_deploy(session))
        assert names(elements)[-3:] == ["Delegator", "Validator", "Amount"]
        values = by_name(elements)
        assert values["Type"].value == "Delegate"
        assert values["Delegator"].value == "01" + "01" * 32
        assert values["Amount"].value == "CSPR 0.1"

    def test_redelegate(self):
        session = auction.valid(auction.REDELEGATE)[0].value
        elements = parse_deploy(make_deploy(session))
        assert names(elements)[-4:] == ["Delegator", "Old", "New", "Amount"]
        assert by_name(elements)["Type"].value == "Redelegate"
        assert by_name(elements)["New"].value == "01" + "06" * 32

    def test_unknown_entry_point_is_generic(self):
        sample = next(
            s for s in auction.invalid(auction.UNDELEGATE)
            if s.label == "undelegate-invalid_entrypoint-by_name"
        )
        elements = by_name(parse_deploy(make_deploy(sample.value)))
        assert session_type(sample.value) == "Contract execution"
        assert elements["Name"].value == "auction"
        assert elements["Entry point"].value == "invalid"
        assert elements["Arg-0"].value.startswith("delegator: 01")
        assert elements["Arg-0"].expert is True

    def test_generic_by_hash(self):
        session = ExecutableItem.by_hash(bytes([7] * 32), "increment",
                                         RuntimeArgs.of(step=CLValue.u64(3)))
        elements = by_name(parse_deploy(make_deploy(session)))
        assert elements["Address"].value == "07" * 32
        assert elements["Arg-0"].value == "step: 3"

    def test_generic_module_bytes(self):
        session = ExecutableItem.from_module_bytes(b"\x00asm", RuntimeArgs())
        elements = by_name(parse_deploy(make_deploy(session)))
        assert len(elements["Module hash"].value) == 64
        assert "Entry point" not in elements

    def test_names_fit_name_row(self, seeded_config):
        """Every extracted name fits the 11-character row."""
        from ledger_vectors.samples import all_samples

        for sample in all_samples(seeded_config):
            for element in parse_deploy(sample.value, label=sample.label):
                assert len(element.name) <= 11, (sample.label, element.name)
