"""
Deploy Sample Generator
=======================

Combines session and payment samples into full deploys.

Every session sample is matched with every payment sample. Header
parameters that do not affect validity (TTL, dependency count, number of
signing keys) are picked at random within the chainspec limits, so
repeated runs with different seeds cover different combinations.

Every deploy is signed by all of its keys. The keys are shuffled first,
so either algorithm can end up as the main key, which becomes the
header account.
"""

from random import Random
from typing import List, Optional
import logging

from ledger_vectors.config import GeneratorConfig, get_default_config
from ledger_vectors.errors import SampleError
from ledger_vectors.samples import auction, generic, payment, transfer
from ledger_vectors.samples.deploy import Deploy, ExecutableItem, SecretKey
from ledger_vectors.samples.sample import Sample

logger = logging.getLogger(__name__)

# From the chainspec.
MIN_TTL_MS = 60 * 1000             # 1 minute
TTL_HOUR_MS = 60 * 60 * 1000       # 1 hour
MAX_TTL_MS = 24 * 60 * 60 * 1000   # 1 day

MIN_DEPS_COUNT = 0
MAX_DEPS_COUNT = 10

MIN_APPROVALS_COUNT = 1
MAX_APPROVALS_COUNT = 10

TTL_CHOICES = (MIN_TTL_MS, TTL_HOUR_MS, MAX_TTL_MS)
DEPS_COUNT_CHOICES = (MIN_DEPS_COUNT, 3, MAX_DEPS_COUNT)
APPROVALS_COUNT_CHOICES = (MIN_APPROVALS_COUNT, 3, MAX_APPROVALS_COUNT)


def signing_keys(count: int) -> List[SecretKey]:
    """Fixed secret keys, alternating ed25519 and secp256k1."""
    keys = []
    for i in range(count):
        if i % 2 == 0:
            keys.append(SecretKey.ed25519(bytes([i] * 32)))
        else:
            keys.append(SecretKey.secp256k1(bytes([i] * 32)))
    return keys


def make_dependencies(count: int) -> List[bytes]:
    return [bytes([i] * 32) for i in range(count)]


def make_deploy_sample(
    session: Sample[ExecutableItem],
    payment_sample: Sample[ExecutableItem],
    ttl_ms: int,
    dependencies: List[bytes],
    keys: List[SecretKey],
    config: GeneratorConfig,
) -> Sample[Deploy]:
    """
    Build a signed deploy sample; it is valid only if both parts are.

    The first key is the main key: its public key is the header account.
    Every key, the main one included, adds an approval.
    """
    if not keys:
        raise SampleError("a deploy needs at least one signing key")
    session_label, session_item, session_valid = session.destructure()
    payment_label, payment_item, payment_valid = payment_sample.destructure()

    deploy = Deploy.new(
        timestamp_ms=config.timestamp_ms(),
        ttl_ms=ttl_ms,
        gas_price=config.gas_price,
        dependencies=dependencies,
        chain_name=config.chain_name,
        payment=payment_item,
        session=session_item,
        account=keys[0].public_key(),
    )
    for key in keys:
        deploy.sign(key)

    sample = Sample(session_label, deploy, session_valid and payment_valid)
    sample.add_label(payment_label)
    return sample


def construct_samples(
    rng: Random,
    session_samples: List[Sample[ExecutableItem]],
    payment_samples: List[Sample[ExecutableItem]],
    config: GeneratorConfig,
) -> List[Sample[Deploy]]:
    """Match every session sample with every payment sample."""
    samples = []
    for session in session_samples:
        for payment_sample in payment_samples:
            keys = signing_keys(rng.choice(APPROVALS_COUNT_CHOICES))
            rng.shuffle(keys)
            samples.append(make_deploy_sample(
                session,
                payment_sample,
                ttl_ms=rng.choice(TTL_CHOICES),
                dependencies=make_dependencies(rng.choice(DEPS_COUNT_CHOICES)),
                keys=keys,
                config=config,
            ))
    return samples


# =============================================================================
# Sample Families
# =============================================================================

def native_transfer_samples(rng: Random, config: GeneratorConfig,
                            valid: bool) -> List[Sample[Deploy]]:
    if valid:
        return construct_samples(rng, transfer.valid(), [payment.valid()], config)
    return construct_samples(
        rng, transfer.invalid(), [payment.invalid(), payment.valid()], config,
    ) + construct_samples(rng, transfer.valid()[:1], [payment.invalid()], config)


def auction_samples(rng: Random, config: GeneratorConfig, entry_point: str,
                    valid: bool) -> List[Sample[Deploy]]:
    if valid:
        return construct_samples(rng, auction.valid(entry_point), [payment.valid()], config)
    return construct_samples(
        rng, auction.invalid(entry_point), [payment.invalid(), payment.valid()], config,
    )


def generic_samples(rng: Random, config: GeneratorConfig,
                    valid: bool) -> List[Sample[Deploy]]:
    # Generic deploys are invalid only if their payment is invalid.
    payment_sample = payment.valid() if valid else payment.invalid()
    return construct_samples(rng, generic.valid(rng), [payment_sample], config)


def _family_samples(rng: Random, config: GeneratorConfig,
                    valid: bool) -> List[Sample[Deploy]]:
    samples = native_transfer_samples(rng, config, valid)
    for entry_point in auction.ENTRY_POINTS:
        samples.extend(auction_samples(rng, config, entry_point, valid))
    samples.extend(generic_samples(rng, config, valid))
    return samples


def valid_samples(rng: Random, config: GeneratorConfig) -> List[Sample[Deploy]]:
    return _family_samples(rng, config, valid=True)


def invalid_samples(rng: Random, config: GeneratorConfig) -> List[Sample[Deploy]]:
    return _family_samples(rng, config, valid=False)


def all_samples(config: Optional[GeneratorConfig] = None) -> List[Sample[Deploy]]:
    """
    Valid samples followed by invalid samples.

    Args:
        config: Generation settings (defaults to get_default_config())

    Returns:
        Ordered deploy samples; the position becomes the record index
    """
    config = config or get_default_config()
    rng = Random(config.seed)
    samples = valid_samples(rng, config) + invalid_samples(rng, config)
    logger.debug("Generated %d deploy samples (seed=%s)", len(samples), config.seed)
    return samples
