"""
Cardano Address Manager

Owns the resolved wallet credentials, builds address requests and resolves
which held signers can satisfy a transaction's required key hashes.
Single-index by design: every role has exactly one key.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .credentials import resolve_credentials
from .exceptions import FeatureNotAvailableError, MissingCredentialError
from .interfaces import Signer
from .types import (
    AddressManagerConfig,
    AddressRequest,
    AddressType,
    Credential,
    EraContext,
    KeyHashCredential,
    ResolvedCredentials,
    RoleBinding,
)


logger = logging.getLogger(__name__)

_CREATE_TOKEN = object()


class AddressManager:
    """
    Credential holder for a single-address wallet

    Instances come only from ``await AddressManager.create(config)``; the
    constructor rejects direct calls. Attributes are read-only once built.
    """

    __slots__ = ("_resolved", "_network_id", "_era_context")

    def __init__(self, token: object, resolved: ResolvedCredentials, network_id: int, era_context: EraContext):
        if token is not _CREATE_TOKEN:
            raise TypeError("AddressManager must be created with 'await AddressManager.create(config)'")
        object.__setattr__(self, "_resolved", resolved)
        object.__setattr__(self, "_network_id", network_id)
        object.__setattr__(self, "_era_context", era_context)

    def __setattr__(self, name, value):
        raise AttributeError(f"AddressManager is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"AddressManager is immutable, cannot delete '{name}'")

    @classmethod
    async def create(cls, config: AddressManagerConfig) -> "AddressManager":
        """
        Resolve every credential and build the manager

        Args:
            config: Address source, network id and era context

        Returns:
            Fully populated AddressManager

        Raises:
            ConfigurationError: If the payment source is a script hash
            Exception: Any signer or secret manager failure, unchanged
        """
        resolved = await resolve_credentials(config.address_source)
        manager = cls(_CREATE_TOKEN, resolved, config.network_id, config.era_context)
        logger.info(
            f"Address manager ready on network {config.network_id} "
            f"(payment={resolved.payment.credential.hash}, "
            f"stake={'yes' if resolved.stake else 'no'}, drep={'yes' if resolved.drep else 'no'})"
        )
        return manager

    # ========================================================================
    # Credentials
    # ========================================================================

    @property
    def network_id(self) -> int:
        return self._network_id

    @property
    def era_context(self) -> EraContext:
        """Era for downstream transaction encoders"""
        return self._era_context

    @property
    def payment_credential(self) -> KeyHashCredential:
        return self._resolved.payment.credential

    @property
    def stake_credential(self) -> Optional[Credential]:
        return self._resolved.stake.credential if self._resolved.stake else None

    @property
    def drep_credential(self) -> Optional[Credential]:
        return self._resolved.drep.credential if self._resolved.drep else None

    @property
    def payment_signer(self) -> Signer:
        return self._resolved.payment.signer

    @property
    def stake_signer(self) -> Optional[Signer]:
        return self._resolved.stake.signer if self._resolved.stake else None

    @property
    def drep_signer(self) -> Optional[Signer]:
        return self._resolved.drep.signer if self._resolved.drep else None

    # ========================================================================
    # Addresses
    # ========================================================================

    def get_next_address(self, address_type: AddressType) -> AddressRequest:
        """
        Build the request for the wallet's receiving address

        There is no index rotation, so this is always the same address.

        Args:
            address_type: BASE (payment + stake), ENTERPRISE (payment only)
                or REWARD (stake only)

        Returns:
            AddressRequest for the address encoder

        Raises:
            MissingCredentialError: If BASE or REWARD is requested without a
                stake credential
        """
        if address_type is AddressType.ENTERPRISE:
            return AddressRequest(
                address_type=AddressType.ENTERPRISE,
                network_id=self._network_id,
                payment_credential=self.payment_credential,
            )
        if address_type is AddressType.BASE:
            return AddressRequest(
                address_type=AddressType.BASE,
                network_id=self._network_id,
                payment_credential=self.payment_credential,
                stake_credential=self._require_stake_credential("base address"),
            )
        if address_type is AddressType.REWARD:
            return self.get_reward_account()
        raise TypeError(f"Unknown address type: {address_type!r}")

    def get_change_address(self, address_type: AddressType) -> AddressRequest:
        """Change goes back to the receiving address"""
        return self.get_next_address(address_type)

    def get_reward_account(self) -> AddressRequest:
        """
        Build the reward account request from the stake credential

        Raises:
            MissingCredentialError: If the manager holds no stake credential
        """
        return AddressRequest(
            address_type=AddressType.REWARD,
            network_id=self._network_id,
            payment_credential=self.payment_credential,
            stake_credential=self._require_stake_credential("reward account"),
        )

    def list_used_addresses(self) -> List[AddressRequest]:
        """
        Approximate the wallet's used addresses

        This is a heuristic, not a ledger query: it returns the base and
        enterprise addresses for the current credentials whether or not they
        have ever appeared on chain. The base address is left out when there
        is no stake credential.
        """
        used = []
        if self.stake_credential is not None:
            used.append(self.get_next_address(AddressType.BASE))
        used.append(self.get_next_address(AddressType.ENTERPRISE))
        return used

    def get_drep_id(self) -> str:
        """Governance identifier for the drep credential (not yet available)"""
        raise FeatureNotAvailableError("DRep id derivation is not implemented yet")

    # ========================================================================
    # Signing
    # ========================================================================

    def resolve_signers_for(self, required_hashes: Iterable[str]) -> Dict[str, Signer]:
        """
        Match required key hashes against the signers this wallet holds

        Only key hash credentials with a signer can match; script hash roles
        never appear. Hashes the wallet cannot satisfy are silently left out,
        so callers must compare the result against what they asked for.

        Args:
            required_hashes: Key hashes a transaction needs signatures from

        Returns:
            Mapping of key hash to signer
        """
        required = set(required_hashes)
        signers: Dict[str, Signer] = {}
        for binding in self._signing_bindings():
            key_hash = binding.credential.hash
            if key_hash in required and key_hash not in signers:
                signers[key_hash] = binding.signer
        return signers

    def _signing_bindings(self) -> List[RoleBinding]:
        return [
            binding
            for binding in self._resolved.bindings()
            if isinstance(binding.credential, KeyHashCredential) and binding.signer is not None
        ]

    def _require_stake_credential(self, purpose: str) -> Credential:
        stake = self.stake_credential
        if stake is None:
            raise MissingCredentialError(f"Cannot build {purpose}: wallet has no stake credential")
        return stake

    def __repr__(self) -> str:
        return (
            f"AddressManager(network_id={self._network_id}, "
            f"payment={self.payment_credential.hash}, "
            f"stake={self.stake_credential}, drep={self.drep_credential})"
        )
