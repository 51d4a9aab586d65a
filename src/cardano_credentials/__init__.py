"""
Cardano Credentials

Credential resolution and signer mediation for a single-address Cardano
wallet. Resolves payment, stake and drep credentials from a mnemonic or from
explicit per-role sources, builds address requests, and picks the signers a
transaction needs.
"""

from .address import to_pycardano_address
from .config import Settings, configure_logging
from .credentials import resolve_credentials, role_derivation_path
from .exceptions import AddressManagerError, ConfigurationError, FeatureNotAvailableError, MissingCredentialError
from .interfaces import SecretManager, Signer
from .keys import ExtendedKeySigner, HDWalletSecretManager, format_derivation_path
from .manager import AddressManager
from .types import (
    AddressManagerConfig,
    AddressRequest,
    AddressType,
    CredentialRole,
    CredentialsSource,
    CredentialType,
    EraContext,
    KeyHashCredential,
    ScriptHashCredential,
    ScriptHashSource,
    SecretManagerSource,
    SignerSource,
)


__all__ = [
    "AddressManager",
    "AddressManagerConfig",
    "AddressRequest",
    "AddressType",
    "CredentialRole",
    "CredentialType",
    "CredentialsSource",
    "EraContext",
    "KeyHashCredential",
    "ScriptHashCredential",
    "ScriptHashSource",
    "SecretManagerSource",
    "SignerSource",
    "Signer",
    "SecretManager",
    "ExtendedKeySigner",
    "HDWalletSecretManager",
    "format_derivation_path",
    "resolve_credentials",
    "role_derivation_path",
    "to_pycardano_address",
    "Settings",
    "configure_logging",
    "AddressManagerError",
    "ConfigurationError",
    "MissingCredentialError",
    "FeatureNotAvailableError",
]
