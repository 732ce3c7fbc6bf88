"""
Auction Samples
===============

Calls to the system auction contract, stored by name or by hash.

| entry point | arguments |
|-------------|-----------|
| `delegate` | `delegator`, `validator`, `amount` |
| `undelegate` | `delegator`, `validator`, `amount` |
| `redelegate` | `delegator`, `validator`, `new_validator`, `amount` |

Arguments are `PublicKey` except `amount`, which is `U512`.

Invalid samples miss one required argument, use the wrong type for
`amount`, or call an unknown entry point. Most of them keep the validity
bit set: the device falls back to showing them as generic contract calls,
and a dApp may legitimately send such arguments.
"""

from typing import Dict, List

from ledger_vectors.samples.bytesrepr import U512_MAX
from ledger_vectors.samples.commons import (
    DELEGATOR,
    NEW_VALIDATOR,
    VALIDATOR,
    sample_executables,
)
from ledger_vectors.samples.deploy import CLValue, ExecutableItem, RuntimeArgs
from ledger_vectors.samples.sample import Sample, join_labels

DELEGATE = "delegate"
UNDELEGATE = "undelegate"
REDELEGATE = "redelegate"

ENTRY_POINTS = (DELEGATE, UNDELEGATE, REDELEGATE)

# Validity bit of each invalid-args sample, per entry point.
INVALID_VALIDITY: Dict[str, Dict[str, bool]] = {
    DELEGATE: {
        "missing_amount": True,
        "missing_delegator": True,
        "missing_validator": True,
        "invalid_type_amount": True,
    },
    UNDELEGATE: {
        "missing_amount": True,
        "missing_delegator": True,
        "missing_validator": True,
        "invalid_type_amount": True,
    },
    REDELEGATE: {
        "missing_amount": True,
        "missing_delegator": True,
        "missing_validator": True,
        "missing_new_validator": False,
        "invalid_type_amount": True,
    },
}


def auction_args(entry_point: str, amount: int) -> RuntimeArgs:
    args = RuntimeArgs()
    args.insert("delegator", CLValue.public_key(DELEGATOR))
    args.insert("validator", CLValue.public_key(VALIDATOR))
    if entry_point == REDELEGATE:
        args.insert("new_validator", CLValue.public_key(NEW_VALIDATOR))
    args.insert("amount", CLValue.u512(amount))
    return args


def valid(entry_point: str) -> List[Sample[ExecutableItem]]:
    amounts = [("amount_min", 0), ("amount_mid", 100_000_000), ("amount_max", U512_MAX)]
    samples = []
    for amount_label, amount in amounts:
        args = auction_args(entry_point, amount)
        samples.extend(sample_executables(
            entry_point, args, join_labels(entry_point, amount_label), True,
        ))
    return samples


def invalid_type_amount_args(entry_point: str) -> RuntimeArgs:
    """Arguments with a U32 amount, ordered validator, delegator, amount."""
    args = RuntimeArgs()
    args.insert("validator", CLValue.public_key(VALIDATOR))
    args.insert("delegator", CLValue.public_key(DELEGATOR))
    args.insert("amount", CLValue.u32(100_000))
    if entry_point == REDELEGATE:
        args.insert("new_validator", CLValue.public_key(NEW_VALIDATOR))
    return args


def invalid(entry_point: str) -> List[Sample[ExecutableItem]]:
    valid_args = auction_args(entry_point, 100_000_000)
    validity = INVALID_VALIDITY[entry_point]

    invalid_args = []
    for arg_name in valid_args.names():
        label = f"missing_{arg_name}"
        invalid_args.append(Sample(label, valid_args.without(arg_name), validity[label]))
    invalid_args.append(Sample(
        "invalid_type_amount",
        invalid_type_amount_args(entry_point),
        validity["invalid_type_amount"],
    ))

    samples = []
    for sample in invalid_args:
        label, args, is_valid = sample.destructure()
        samples.extend(sample_executables(entry_point, args, label, is_valid))
    # Valid args with an unknown entry point are shown as a generic call.
    samples.extend(sample_executables("invalid", valid_args, "invalid_entrypoint", True))

    for sample in samples:
        sample.prepend_label(entry_point)
    return samples
