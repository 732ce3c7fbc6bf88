"""
Generic contract call samples.

Any stored contract or Wasm module that is not a native transfer or an
auction call. There are no rules such a call could violate, so generic
sessions are always valid; the deploy only becomes invalid through its
payment.
"""

from random import Random
import string
from typing import List

from ledger_vectors.samples.commons import sample_executables
from ledger_vectors.samples.deploy import CLValue, ExecutableItem, RuntimeArgs
from ledger_vectors.samples.sample import Sample

GENERIC_CONTRACT_NAME = "counter"
GENERIC_CONTRACT_HASH = bytes([7] * 32)
GENERIC_ENTRY_POINT = "increment"


def random_args(rng: Random) -> RuntimeArgs:
    args = RuntimeArgs()
    args.insert("step", CLValue.u64(rng.randrange(1 << 64)))
    args.insert("note", CLValue.string(
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(0, 40)))
    ))
    args.insert("payload", CLValue.byte_array(bytes(rng.randrange(256) for _ in range(32))))
    return args


def valid(rng: Random) -> List[Sample[ExecutableItem]]:
    samples = sample_executables(
        GENERIC_ENTRY_POINT,
        random_args(rng),
        "generic",
        True,
        contract_name=GENERIC_CONTRACT_NAME,
        contract_hash=GENERIC_CONTRACT_HASH,
    )
    module = b"\x00asm\x01\x00\x00\x00" + bytes(rng.randrange(256) for _ in range(24))
    samples.append(Sample(
        "generic-module_bytes",
        ExecutableItem.from_module_bytes(module, random_args(rng)),
        True,
    ))
    samples.append(Sample(
        "generic-no_args",
        ExecutableItem.by_name(GENERIC_CONTRACT_NAME, GENERIC_ENTRY_POINT, RuntimeArgs()),
        True,
    ))
    return samples
