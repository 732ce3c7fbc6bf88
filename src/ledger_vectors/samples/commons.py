"""
Shared sample fixtures: well-known keys, addresses and helpers used by
more than one sample family.
"""

from typing import List, Optional

from ledger_vectors.samples.deploy import (
    AccessRights,
    ExecutableItem,
    PublicKey,
    RuntimeArgs,
    URef,
)
from ledger_vectors.samples.sample import Sample, join_labels

# Purse address used by URef targets and sources.
UREF_ADDR = bytes([2] * 32)
SOURCE_UREF_ADDR = bytes([3] * 32)

# System auction contract.
AUCTION_CONTRACT_NAME = "auction"
AUCTION_CONTRACT_HASH = bytes([5] * 32)

# 1 CSPR in motes.
MOTES_PER_CSPR = 1_000_000_000

DELEGATOR = PublicKey.ed25519(bytes([1] * 32))
VALIDATOR = PublicKey.ed25519(bytes([3] * 32))
NEW_VALIDATOR = PublicKey.ed25519(bytes([6] * 32))


def source_uref() -> URef:
    return URef(SOURCE_UREF_ADDR, AccessRights.READ_ADD_WRITE)


def sample_executables(
    entry_point: str,
    args: RuntimeArgs,
    label: Optional[str],
    valid: bool,
    contract_name: str = AUCTION_CONTRACT_NAME,
    contract_hash: bytes = AUCTION_CONTRACT_HASH,
) -> List[Sample[ExecutableItem]]:
    """
    Wrap the same call as a stored-contract-by-name and by-hash item.

    Labels end with "by_name" or "by_hash".
    """
    return [
        Sample(
            join_labels(label or "", "by_name"),
            ExecutableItem.by_name(contract_name, entry_point, args),
            valid,
        ),
        Sample(
            join_labels(label or "", "by_hash"),
            ExecutableItem.by_hash(contract_hash, entry_point, args),
            valid,
        ),
    ]
