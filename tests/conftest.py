"""
Ledger Vectors - Test Configuration
===================================

Shared pytest fixtures for the test suite.

It provides:
- Isolation of the global default configuration and environment
- A seeded generator configuration
- Small element lists used by the layout tests
"""

import pytest

from ledger_vectors.config import GeneratorConfig, set_default_config
from ledger_vectors.layout import Element


ENV_VARS = (
    "LEDGER_VECTORS_SEED",
    "LEDGER_VECTORS_CHAIN_NAME",
    "LEDGER_VECTORS_TESTNET",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """
    Fixture: Clear generator environment variables and the cached default
    configuration around every test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def seeded_config() -> GeneratorConfig:
    """
    Fixture: Configuration with a fixed seed, for reproducible samples.
    """
    return GeneratorConfig(seed=1234)


@pytest.fixture
def mixed_elements():
    """
    Fixture: Regular and expert elements, one of them spanning two screens.
    """
    return [
        Element.regular("type", "Token transfer"),
        Element.expert_only("chain ID", "casper-test"),
        Element.regular("to", "01" * 18),
        Element.regular("amount", "CSPR 24.5"),
        Element.expert_only("id", "999"),
    ]
