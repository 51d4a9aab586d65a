"""
Credential Types

Data model shared by the resolver, the address manager and the address
encoder adapter. Tagged unions are frozen dataclasses; callers branch on
the concrete class.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import DEFAULT_ERA
from .interfaces import SecretManager, Signer


# ============================================================================
# Enums
# ============================================================================


class CredentialType(str, Enum):
    """Credential kinds recognised by the ledger"""

    KEY_HASH = "key_hash"
    SCRIPT_HASH = "script_hash"


class CredentialRole(str, Enum):
    """Roles a wallet credential can play"""

    PAYMENT = "payment"
    STAKE = "stake"
    DREP = "drep"


class AddressType(str, Enum):
    """
    Address shapes the encoder can build

    - BASE: payment + stake credential
    - ENTERPRISE: payment credential only
    - REWARD: stake credential only
    """

    BASE = "base"
    ENTERPRISE = "enterprise"
    REWARD = "reward"


# ============================================================================
# Credentials
# ============================================================================


def _check_hash(value: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"Credential hash must be a non-empty string, got {value!r}")


@dataclass(frozen=True)
class KeyHashCredential:
    """Credential backed by a verification key hash"""

    hash: str

    def __post_init__(self):
        _check_hash(self.hash)

    @property
    def type(self) -> CredentialType:
        return CredentialType.KEY_HASH


@dataclass(frozen=True)
class ScriptHashCredential:
    """Credential backed by a script hash"""

    hash: str

    def __post_init__(self):
        _check_hash(self.hash)

    @property
    def type(self) -> CredentialType:
        return CredentialType.SCRIPT_HASH


Credential = Union[KeyHashCredential, ScriptHashCredential]


# ============================================================================
# Sources
# ============================================================================


@dataclass(frozen=True)
class SignerSource:
    """Credential provided by a signer"""

    signer: Signer


@dataclass(frozen=True)
class ScriptHashSource:
    """Credential provided by a script hash (cannot sign)"""

    script_hash: str


CredentialSource = Union[SignerSource, ScriptHashSource]


@dataclass(frozen=True)
class SecretManagerSource:
    """Derive payment, stake and drep keys from a secret manager"""

    secret_manager: SecretManager


@dataclass(frozen=True)
class CredentialsSource:
    """
    Explicit per-role credentials

    Omitted stake or drep roles are left unset; nothing is derived for them.
    """

    payment: CredentialSource
    stake: Optional[CredentialSource] = None
    drep: Optional[CredentialSource] = None


AddressSource = Union[SecretManagerSource, CredentialsSource]


# ============================================================================
# Era context
# ============================================================================


@dataclass(frozen=True)
class EraContext:
    """Ledger era handed to components that encode transactions"""

    era: str = DEFAULT_ERA

    @property
    def is_conway(self) -> bool:
        return self.era.lower() == "conway"


@dataclass(frozen=True)
class AddressManagerConfig:
    """Inputs for AddressManager.create"""

    address_source: AddressSource
    network_id: int
    era_context: EraContext = EraContext()


# ============================================================================
# Resolved values
# ============================================================================


@dataclass(frozen=True)
class RoleBinding:
    """
    A role credential together with the signer backing it

    The signer is present exactly when the credential is a key hash.
    """

    role: CredentialRole
    credential: Credential
    signer: Optional[Signer] = None

    def __post_init__(self):
        if isinstance(self.credential, KeyHashCredential):
            if self.signer is None:
                raise ValueError(f"{self.role.value} key hash credential requires a signer")
        elif isinstance(self.credential, ScriptHashCredential):
            if self.signer is not None:
                raise ValueError(f"{self.role.value} script hash credential cannot hold a signer")
        else:
            raise TypeError(f"Unknown credential type: {type(self.credential).__name__}")

        if self.role is CredentialRole.PAYMENT and not isinstance(self.credential, KeyHashCredential):
            raise ValueError("Payment credential must be a key hash")


@dataclass(frozen=True)
class ResolvedCredentials:
    """Outcome of resolving an address source"""

    payment: RoleBinding
    stake: Optional[RoleBinding] = None
    drep: Optional[RoleBinding] = None

    def bindings(self) -> tuple[RoleBinding, ...]:
        """Bindings that are present, payment first"""
        return tuple(b for b in (self.payment, self.stake, self.drep) if b is not None)


@dataclass(frozen=True)
class AddressRequest:
    """Everything an address encoder needs to build an on-chain address"""

    address_type: AddressType
    network_id: int
    payment_credential: KeyHashCredential
    stake_credential: Optional[Credential] = None
