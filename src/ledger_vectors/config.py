"""
Generator Configuration
=======================

Settings for a test-vector generation run. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

With the defaults, a run produces the same kind of vectors the hardware
test pipelines consume: testnet flag set, "mainnet" chain name inside the
deploys, a fixed deploy timestamp and a fresh random seed.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import os

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class GeneratorConfig:
    """
    Configuration for a generation run.

    Attributes:
        seed: Seed for the sample shuffles (None = nondeterministic)
        testnet: Value of the "testnet" flag in every record
        chain_name: Chain name written into every deploy header
        timestamp: Deploy timestamp, ISO 8601 with a trailing "Z"
        gas_price: Gas price written into every deploy header
        json_indent: Indentation of the emitted JSON array
    """

    seed: Optional[int] = None
    testnet: bool = True
    chain_name: str = "mainnet"
    timestamp: str = "2021-05-04T14:20:35.104Z"
    gas_price: int = 2
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """
        Create GeneratorConfig from environment variables.

        Environment variables (all optional):
            LEDGER_VECTORS_SEED: Integer seed
            LEDGER_VECTORS_CHAIN_NAME: Chain name
            LEDGER_VECTORS_TESTNET: "0"/"false" or "1"/"true"

        Returns:
            GeneratorConfig with values from environment variables
        """
        config = cls()

        if seed := os.environ.get("LEDGER_VECTORS_SEED"):
            try:
                config.seed = int(seed)
            except ValueError:
                pass  # Ignore invalid values

        if chain_name := os.environ.get("LEDGER_VECTORS_CHAIN_NAME"):
            config.chain_name = chain_name

        if testnet := os.environ.get("LEDGER_VECTORS_TESTNET"):
            flag = testnet.strip().lower()
            if flag in ("1", "true", "yes"):
                config.testnet = True
            elif flag in ("0", "false", "no"):
                config.testnet = False

        return config

    def timestamp_ms(self) -> int:
        """Deploy timestamp as milliseconds since the Unix epoch."""
        moment = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        return (moment - _EPOCH) // timedelta(milliseconds=1)


# Global default configuration
_default_config: Optional[GeneratorConfig] = None


def get_default_config() -> GeneratorConfig:
    """
    Get the default configuration.

    Created from environment variables on first access.
    """
    global _default_config
    if _default_config is None:
        _default_config = GeneratorConfig.from_env()
    return _default_config


def set_default_config(config: Optional[GeneratorConfig]) -> None:
    """Set (or with None, reset) the default configuration."""
    global _default_config
    _default_config = config
