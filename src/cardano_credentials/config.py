"""
Configuration

Environment-driven settings for building an address manager from a
mnemonic. Values load from the process environment and the project .env
file.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import pycardano as pc
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .address import network_from_id, network_id_from_name
from .constants import DEFAULT_ERA
from .exceptions import ConfigurationError
from .keys import HDWalletSecretManager
from .types import AddressManagerConfig, EraContext, SecretManagerSource


PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Wallet settings loaded from the environment"""

    network: Literal["testnet", "mainnet"] = "testnet"
    wallet_mnemonic: Optional[SecretStr] = None
    ledger_era: str = DEFAULT_ERA
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def network_id(self) -> int:
        return network_id_from_name(self.network)

    @property
    def cardano_network(self) -> pc.Network:
        return network_from_id(self.network_id)

    @property
    def era_context(self) -> EraContext:
        return EraContext(era=self.ledger_era)

    def address_source(self) -> SecretManagerSource:
        """
        Secret manager source backed by the configured mnemonic

        Raises:
            ConfigurationError: If no mnemonic is configured
        """
        if self.wallet_mnemonic is None:
            raise ConfigurationError("wallet_mnemonic is not configured")
        return SecretManagerSource(HDWalletSecretManager.from_mnemonic(self.wallet_mnemonic.get_secret_value()))

    def manager_config(self) -> AddressManagerConfig:
        """AddressManagerConfig for the configured wallet and network"""
        return AddressManagerConfig(
            address_source=self.address_source(),
            network_id=self.network_id,
            era_context=self.era_context,
        )


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
