"""
System payment samples.

The standard payment is empty module bytes with a single U512 `amount`
argument. Without `amount` the device cannot show the fee and must
reject the deploy.
"""

from ledger_vectors.samples.commons import MOTES_PER_CSPR
from ledger_vectors.samples.deploy import CLValue, ExecutableItem, RuntimeArgs
from ledger_vectors.samples.sample import Sample

PAYMENT_AMOUNT = 2_500_000_000


def valid() -> Sample[ExecutableItem]:
    args = RuntimeArgs.of(amount=CLValue.u512(PAYMENT_AMOUNT))
    return Sample("payment_system", ExecutableItem.from_module_bytes(b"", args), True)


def invalid() -> Sample[ExecutableItem]:
    args = RuntimeArgs.of(
        quantity=CLValue.u512(PAYMENT_AMOUNT // MOTES_PER_CSPR),
    )
    return Sample(
        "payment_missing_amount",
        ExecutableItem.from_module_bytes(b"", args),
        False,
    )
