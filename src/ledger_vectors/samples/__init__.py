"""
Sample Deploys
==============

Builds the labeled deploys that the test vectors are generated from.

This package provides:
- **Sample**: a value with a label and a validity bit
- **Deploy model**: keys, signatures, CL values, runtime args, executable items
- **Sample families**: native transfers, auction calls, generic calls
- **Generator**: combines sessions and payments into deploy samples

Quick Start
-----------
    >>> from ledger_vectors.config import GeneratorConfig
    >>> from ledger_vectors.samples import all_samples
    >>> samples = all_samples(GeneratorConfig(seed=7))
    >>> label, deploy, valid = samples[0].destructure()
"""

from ledger_vectors.samples.sample import Sample, join_labels
from ledger_vectors.samples.deploy import (
    CLType,
    CLValue,
    KeyAlgorithm,
    AccessRights,
    ExecutableKind,
    PublicKey,
    SecretKey,
    Signature,
    Approval,
    AccountHash,
    URef,
    RuntimeArgs,
    ExecutableItem,
    DeployHeader,
    Deploy,
)
from ledger_vectors.samples.generator import (
    construct_samples,
    valid_samples,
    invalid_samples,
    all_samples,
)

__all__ = [
    "Sample",
    "join_labels",
    # Deploy model
    "CLType",
    "CLValue",
    "KeyAlgorithm",
    "AccessRights",
    "ExecutableKind",
    "PublicKey",
    "SecretKey",
    "Signature",
    "Approval",
    "AccountHash",
    "URef",
    "RuntimeArgs",
    "ExecutableItem",
    "DeployHeader",
    "Deploy",
    # Generator
    "construct_samples",
    "valid_samples",
    "invalid_samples",
    "all_samples",
]
