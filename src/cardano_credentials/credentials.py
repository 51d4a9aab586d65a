"""
Credential Resolution

Turns an address source into payment, stake and drep credentials plus the
signers that back key hash credentials.
"""

import asyncio
import logging
from typing import Optional

from .constants import (
    ADDRESS_INDEX,
    DEFAULT_DREP_KEY_DERIVATION_PATH,
    DEFAULT_PAYMENT_KEY_DERIVATION_PATH,
    DEFAULT_STAKE_KEY_DERIVATION_PATH,
)
from .exceptions import ConfigurationError
from .interfaces import SecretManager
from .types import (
    AddressSource,
    CredentialRole,
    CredentialSource,
    CredentialsSource,
    KeyHashCredential,
    ResolvedCredentials,
    RoleBinding,
    ScriptHashCredential,
    ScriptHashSource,
    SecretManagerSource,
    SignerSource,
)


logger = logging.getLogger(__name__)

ROLE_DERIVATION_PATHS = {
    CredentialRole.PAYMENT: DEFAULT_PAYMENT_KEY_DERIVATION_PATH,
    CredentialRole.STAKE: DEFAULT_STAKE_KEY_DERIVATION_PATH,
    CredentialRole.DREP: DEFAULT_DREP_KEY_DERIVATION_PATH,
}


def role_derivation_path(role: CredentialRole) -> tuple[int, ...]:
    """Full derivation path for the single key of a role"""
    return (*ROLE_DERIVATION_PATHS[role], ADDRESS_INDEX)


def validate_address_source(source: AddressSource) -> None:
    """
    Reject address sources that can never produce a usable manager

    Raises:
        ConfigurationError: If the payment credential is a script hash
        TypeError: If the source is not a known variant
    """
    if isinstance(source, SecretManagerSource):
        return
    if not isinstance(source, CredentialsSource):
        raise TypeError(f"Unknown address source: {type(source).__name__}")

    if isinstance(source.payment, ScriptHashSource):
        raise ConfigurationError(
            "Payment credential cannot be a script hash. "
            "Payment credentials must be key hashes that can sign transactions."
        )
    for role, credential_source in (
        (CredentialRole.PAYMENT, source.payment),
        (CredentialRole.STAKE, source.stake),
        (CredentialRole.DREP, source.drep),
    ):
        if credential_source is not None and not isinstance(credential_source, (SignerSource, ScriptHashSource)):
            raise TypeError(f"Unknown {role.value} credential source: {type(credential_source).__name__}")


async def resolve_credential_source(role: CredentialRole, source: CredentialSource) -> RoleBinding:
    """
    Resolve one explicitly configured role

    Args:
        role: Role being resolved
        source: Signer or script hash source

    Returns:
        RoleBinding for the role

    Raises:
        ConfigurationError: If a payment role is given a script hash
    """
    if isinstance(source, ScriptHashSource):
        if role is CredentialRole.PAYMENT:
            raise ConfigurationError("Payment credential cannot be a script hash")
        return RoleBinding(role=role, credential=ScriptHashCredential(source.script_hash))

    if isinstance(source, SignerSource):
        key_hash = await source.signer.get_public_key_hash()
        return RoleBinding(role=role, credential=KeyHashCredential(key_hash), signer=source.signer)

    raise TypeError(f"Unknown credential source: {type(source).__name__}")


async def derive_role(secret_manager: SecretManager, role: CredentialRole) -> RoleBinding:
    """Derive the single key for a role and bind it as a key hash credential"""
    signer = await secret_manager.get_signer(list(role_derivation_path(role)))
    key_hash = await signer.get_public_key_hash()
    logger.debug(f"Derived {role.value} credential {key_hash}")
    return RoleBinding(role=role, credential=KeyHashCredential(key_hash), signer=signer)


async def _resolve_optional(role: CredentialRole, source: Optional[CredentialSource]) -> Optional[RoleBinding]:
    if source is None:
        return None
    return await resolve_credential_source(role, source)


async def resolve_credentials(source: AddressSource) -> ResolvedCredentials:
    """
    Resolve payment, stake and drep credentials concurrently

    Explicit sources leave omitted stake/drep roles unset. Secret manager
    sources always derive all three roles. The first failing role aborts
    the resolution and its exception propagates unchanged.

    Args:
        source: Secret manager or explicit credentials source

    Returns:
        ResolvedCredentials with a key hash payment binding

    Raises:
        ConfigurationError: If the payment source is a script hash
    """
    try:
        validate_address_source(source)
    except ConfigurationError as e:
        logger.error(f"Rejected address source: {e}")
        raise

    if isinstance(source, SecretManagerSource):
        payment, stake, drep = await asyncio.gather(
            derive_role(source.secret_manager, CredentialRole.PAYMENT),
            derive_role(source.secret_manager, CredentialRole.STAKE),
            derive_role(source.secret_manager, CredentialRole.DREP),
        )
    else:
        payment, stake, drep = await asyncio.gather(
            resolve_credential_source(CredentialRole.PAYMENT, source.payment),
            _resolve_optional(CredentialRole.STAKE, source.stake),
            _resolve_optional(CredentialRole.DREP, source.drep),
        )

    return ResolvedCredentials(payment=payment, stake=stake, drep=drep)
