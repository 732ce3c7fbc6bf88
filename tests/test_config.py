"""
Generator Configuration Tests
=============================

Tests for configuration defaults, environment overrides and the
global default configuration.
"""

from ledger_vectors.config import (
    GeneratorConfig,
    get_default_config,
    set_default_config,
)


class TestGeneratorConfig:
    """Test configuration values."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.seed is None
        assert config.testnet is True
        assert config.chain_name == "mainnet"
        assert config.gas_price == 2
        assert config.json_indent == 2

    def test_timestamp_ms(self):
        """The default timestamp is 2021-05-04T14:20:35.104Z."""
        assert GeneratorConfig().timestamp_ms() == 1_620_138_035_104
        assert GeneratorConfig(timestamp="1970-01-01T00:00:00.001Z").timestamp_ms() == 1

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LEDGER_VECTORS_SEED", "42")
        monkeypatch.setenv("LEDGER_VECTORS_CHAIN_NAME", "casper-test")
        monkeypatch.setenv("LEDGER_VECTORS_TESTNET", "false")
        config = GeneratorConfig.from_env()
        assert config.seed == 42
        assert config.chain_name == "casper-test"
        assert config.testnet is False

    def test_from_env_ignores_bad_values(self, monkeypatch):
        monkeypatch.setenv("LEDGER_VECTORS_SEED", "forty-two")
        monkeypatch.setenv("LEDGER_VECTORS_TESTNET", "maybe")
        config = GeneratorConfig.from_env()
        assert config.seed is None
        assert config.testnet is True

    def test_from_env_empty(self):
        assert GeneratorConfig.from_env() == GeneratorConfig()


class TestDefaultConfig:
    """Test the global default configuration."""

    def test_created_once(self):
        assert get_default_config() is get_default_config()

    def test_set_and_reset(self, monkeypatch):
        custom = GeneratorConfig(seed=5)
        set_default_config(custom)
        assert get_default_config() is custom

        set_default_config(None)
        monkeypatch.setenv("LEDGER_VECTORS_SEED", "9")
        assert get_default_config().seed == 9
