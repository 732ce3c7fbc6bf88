"""
Element Extraction
==================

Turns a deploy into the ordered list of elements shown on the device.

The order is the order in which the device walks through the screens:

    Txn hash, Type, Chain ID, Account, Timestamp, Ttl, Gas price,
    Deps # and each dependency, Fee (or payment details),
    then the session-specific fields

Session fields depend on the kind of call:

| session | elements |
|---------|----------|
| native transfer | Target, Amount, Source, Id |
| delegate / undelegate | Delegator, Validator, Amount |
| redelegate | Delegator, Old, New, Amount |
| anything else | Name or Address or Module hash, Entry point, Arg-N |

Header details that rarely matter to a user are expert-only. Arguments
missing from a deploy are simply not shown; the extractor does not judge
whether a deploy is acceptable.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
import logging

from ledger_vectors.layout.elements import Element
from ledger_vectors.samples import auction
from ledger_vectors.samples.commons import MOTES_PER_CSPR
from ledger_vectors.samples.deploy import (
    AccountHash,
    CLType,
    CLValue,
    Deploy,
    ExecutableItem,
    ExecutableKind,
    blake2b_256,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# (suffix, milliseconds), largest first
_TTL_UNITS = (
    ("day", 24 * 60 * 60 * 1000),
    ("h", 60 * 60 * 1000),
    ("m", 60 * 1000),
    ("s", 1000),
    ("ms", 1),
)

_SESSION_TYPES = {
    auction.DELEGATE: "Delegate",
    auction.UNDELEGATE: "Undelegate",
    auction.REDELEGATE: "Redelegate",
}


# =============================================================================
# Value Formatting
# =============================================================================

def format_motes(motes: int) -> str:
    """
    Format an amount of motes as CSPR.

    Example:
        >>> format_motes(24_500_000_000)
        'CSPR 24.5'
        >>> format_motes(0)
        'CSPR 0'
    """
    whole, fraction = divmod(motes, MOTES_PER_CSPR)
    digits = f"{fraction:09d}".rstrip("0")
    if digits:
        return f"CSPR {whole}.{digits}"
    return f"CSPR {whole}"


def format_ttl(ttl_ms: int) -> str:
    """Human-readable duration: '1m', '1h', '1day', '1h 30m'."""
    if ttl_ms == 0:
        return "0s"
    parts = []
    remaining = ttl_ms
    for suffix, size in _TTL_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)


def format_timestamp(timestamp_ms: int) -> str:
    moment = _EPOCH + timedelta(milliseconds=timestamp_ms)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_cl_value(value: CLValue) -> str:
    """Display text of a runtime argument value."""
    cl_type = value.cl_type
    if cl_type == CLType.OPTION:
        if value.value is None:
            return "None"
        return format_cl_value(CLValue(value.inner, value.value))
    if cl_type == CLType.BOOL:
        return "true" if value.value else "false"
    if cl_type == CLType.UNIT:
        return ""
    if cl_type == CLType.STRING:
        return value.value
    if cl_type == CLType.BYTE_ARRAY:
        return value.value.hex()
    if cl_type == CLType.PUBLIC_KEY:
        return value.value.to_hex()
    if cl_type in (CLType.UREF, CLType.KEY):
        return value.value.to_formatted_str()
    return str(value.value)


def format_amount(value: CLValue) -> str:
    """U512 amounts are shown in CSPR, anything else as is."""
    if value.cl_type == CLType.U512:
        return format_motes(value.value)
    return format_cl_value(value)


def format_target(value: CLValue) -> str:
    # Raw 32-byte targets are account hashes.
    if value.cl_type == CLType.BYTE_ARRAY and len(value.value) == 32:
        return AccountHash(value.value).to_formatted_str()
    return format_cl_value(value)


# =============================================================================
# Deploy Parts
# =============================================================================

def session_type(session: ExecutableItem) -> str:
    if session.kind == ExecutableKind.TRANSFER:
        return "Token transfer"
    if is_auction_call(session):
        return _SESSION_TYPES[session.entry_point]
    return "Contract execution"


def is_auction_call(session: ExecutableItem) -> bool:
    return (
        session.kind in (ExecutableKind.STORED_CONTRACT_BY_HASH,
                         ExecutableKind.STORED_CONTRACT_BY_NAME)
        and session.entry_point in _SESSION_TYPES
    )


def header_elements(deploy: Deploy) -> List[Element]:
    header = deploy.header
    elements = [
        Element.regular("txn hash", deploy.hash.hex()),
        Element.regular("type", session_type(deploy.session)),
        Element.expert_only("chain ID", header.chain_name),
        Element.regular("account", header.account.to_hex()),
        Element.expert_only("timestamp", format_timestamp(header.timestamp_ms)),
        Element.expert_only("ttl", format_ttl(header.ttl_ms)),
        Element.expert_only("gas price", str(header.gas_price)),
        Element.expert_only("deps #", str(len(header.dependencies))),
    ]
    for index, dependency in enumerate(header.dependencies):
        elements.append(Element.expert_only(f"dep-{index}", dependency.hex()))
    return elements


def payment_elements(payment: ExecutableItem) -> List[Element]:
    amount = payment.args.get("amount")
    if payment.is_system_payment and amount is not None:
        return [Element.regular("fee", format_amount(amount))]

    kind = "system" if payment.is_system_payment else "contract"
    elements = [Element.regular("payment", kind)]
    for index, (name, value) in enumerate(payment.args):
        elements.append(Element.expert_only(
            f"pay arg-{index}", f"{name}: {format_cl_value(value)}",
        ))
    return elements


def transfer_elements(session: ExecutableItem) -> List[Element]:
    args = session.args
    elements = []
    if (target := args.get("target")) is not None:
        elements.append(Element.regular("target", format_target(target)))
    if (amount := args.get("amount")) is not None:
        elements.append(Element.regular("amount", format_amount(amount)))
    if (source := args.get("source")) is not None:
        elements.append(Element.expert_only("source", format_cl_value(source)))
    if (transfer_id := args.get("id")) is not None:
        element = Element.regular("id", format_cl_value(transfer_id))
        if transfer_id.value is None:
            # Nothing for the user to check without an id.
            element.as_expert()
        elements.append(element)
    return elements


def auction_elements(session: ExecutableItem) -> List[Element]:
    if session.entry_point == auction.REDELEGATE:
        labels = [("delegator", "delegator"), ("validator", "old"),
                  ("new_validator", "new")]
    else:
        labels = [("delegator", "delegator"), ("validator", "validator")]

    elements = []
    for arg_name, label in labels:
        if (value := session.args.get(arg_name)) is not None:
            elements.append(Element.regular(label, format_cl_value(value)))
    if (amount := session.args.get("amount")) is not None:
        elements.append(Element.regular("amount", format_amount(amount)))
    return elements


def generic_elements(session: ExecutableItem) -> List[Element]:
    elements = []
    if session.kind == ExecutableKind.STORED_CONTRACT_BY_NAME:
        elements.append(Element.regular("name", session.contract_name))
    elif session.kind == ExecutableKind.STORED_CONTRACT_BY_HASH:
        elements.append(Element.regular("address", session.contract_hash.hex()))
    else:
        elements.append(Element.regular(
            "module hash", blake2b_256(session.module_bytes).hex(),
        ))
    if session.entry_point is not None:
        elements.append(Element.regular("entry point", session.entry_point))
    for index, (name, value) in enumerate(session.args):
        elements.append(Element.expert_only(
            f"arg-{index}", f"{name}: {format_cl_value(value)}",
        ))
    return elements


def session_elements(session: ExecutableItem) -> List[Element]:
    if session.kind == ExecutableKind.TRANSFER:
        return transfer_elements(session)
    if is_auction_call(session):
        return auction_elements(session)
    return generic_elements(session)


def parse_deploy(deploy: Deploy, label: Optional[str] = None) -> List[Element]:
    """
    Extract the display elements of a deploy, in display order.

    Args:
        deploy: The deploy to display
        label: Sample label, only used for logging

    Returns:
        Elements in the order the device shows them
    """
    elements = (
        header_elements(deploy)
        + payment_elements(deploy.payment)
        + session_elements(deploy.session)
    )
    logger.debug("Extracted %d elements from %s", len(elements), label or "deploy")
    return elements
