"""
Native Transfer Samples
=======================

Session code of kind TRANSFER.

Arguments:
| name | type |
|------|------|
| `amount` | `U512` |
| `target` | `[u8; 32]`, `URef`, `Key` or `PublicKey` |
| `id` | `Option<u64>` |
| `source` | `URef` (optional; defaults to the account's main purse) |
"""

from dataclasses import dataclass
from typing import List, Optional

from ledger_vectors.samples.bytesrepr import U512_MAX
from ledger_vectors.samples.commons import UREF_ADDR, source_uref
from ledger_vectors.samples.deploy import (
    AccessRights,
    AccountHash,
    CLValue,
    ExecutableItem,
    PublicKey,
    RuntimeArgs,
    URef,
)
from ledger_vectors.samples.sample import Sample, join_labels

TARGET_ACCOUNT = (
    "account-hash-45f3aa6ce2a450dd5a4f2cc4cc9054aded66de6b6cfc4ad977e7251cf94b649b"
)
TARGET_ED25519 = "2bac1d0ff9240ff0b7b06d555815640497861619ca12583ddef434885416e69b"
TARGET_SECP256K1 = "026e1b7a8e3243f5ff14e825b0fde15103588bb61e6ae99084968b017118e0504f"

TRANSFER_ID = 999


@dataclass(frozen=True)
class TransferTarget:
    label: str
    value: CLValue


def transfer_targets() -> List[TransferTarget]:
    return [
        TransferTarget("target_bytes", CLValue.byte_array(bytes([255] * 32))),
        TransferTarget(
            "target_uref",
            CLValue.uref(URef(UREF_ADDR, AccessRights.READ_ADD_WRITE)),
        ),
        TransferTarget(
            "target_key_account",
            CLValue.key(AccountHash.from_formatted_str(TARGET_ACCOUNT)),
        ),
        TransferTarget(
            "target_ed25519_public_key",
            CLValue.public_key(PublicKey.ed25519(bytes.fromhex(TARGET_ED25519))),
        ),
        TransferTarget(
            "target_secp256k1_public_key",
            CLValue.public_key(PublicKey.secp256k1(bytes.fromhex(TARGET_SECP256K1))),
        ),
    ]


def transfer_amounts() -> List[Sample[int]]:
    return [
        Sample("amount_min", 0, True),
        Sample("amount_mid", 24_500_000_000, True),
        Sample("amount_max", U512_MAX, True),
    ]


def transfer_args(
    target: CLValue,
    amount: int,
    transfer_id: Optional[int],
    with_source: bool,
) -> RuntimeArgs:
    args = RuntimeArgs()
    args.insert("amount", CLValue.u512(amount))
    args.insert("id", CLValue.option_u64(transfer_id))
    if with_source:
        args.insert("source", CLValue.uref(source_uref()))
    args.insert("target", target)
    return args


def valid() -> List[Sample[ExecutableItem]]:
    samples = []
    for target in transfer_targets():
        for amount in transfer_amounts():
            for with_source in (False, True):
                for transfer_id in (TRANSFER_ID, None):
                    label = join_labels(
                        "native_transfer",
                        target.label,
                        amount.label,
                        "source_uref" if with_source else "source_none",
                        "id_some" if transfer_id is not None else "id_none",
                    )
                    args = transfer_args(target.value, amount.value,
                                         transfer_id, with_source)
                    samples.append(Sample(label, ExecutableItem.transfer(args), True))
    return samples


def invalid() -> List[Sample[ExecutableItem]]:
    target = transfer_targets()[0]
    base = transfer_args(target.value, 24_500_000_000, TRANSFER_ID, False)

    invalid_args = [
        Sample("missing_amount", base.without("amount"), False),
        Sample("missing_target", base.without("target"), False),
        Sample("invalid_type_amount",
               base.replaced("amount", CLValue.u32(100_000)), False),
    ]
    return [
        Sample(
            join_labels("native_transfer", sample.label),
            ExecutableItem.transfer(sample.value),
            sample.valid,
        )
        for sample in invalid_args
    ]
