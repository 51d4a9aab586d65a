"""
HD Wallet Key Adapters

pycardano implementations of the Signer and SecretManager capabilities.
Handles mnemonic loading, path derivation and signing.
"""

from typing import Sequence

import pycardano as pc

from .constants import HARDENED_OFFSET


def format_derivation_path(derivation_path: Sequence[int]) -> str:
    """
    Render an index sequence in BIP32 notation

    Args:
        derivation_path: Indices, hardened ones carrying HARDENED_OFFSET

    Returns:
        Path string such as "m/1852'/1815'/0'/0/0"
    """
    if not derivation_path:
        raise ValueError("Derivation path cannot be empty")

    segments = ["m"]
    for index in derivation_path:
        if index < 0 or index >= 2 * HARDENED_OFFSET:
            raise ValueError(f"Derivation index out of range: {index}")
        if index >= HARDENED_OFFSET:
            segments.append(f"{index - HARDENED_OFFSET}'")
        else:
            segments.append(str(index))
    return "/".join(segments)


class ExtendedKeySigner:
    """Signer backed by a pycardano extended signing key"""

    def __init__(self, signing_key: pc.ExtendedSigningKey):
        self._signing_key = signing_key
        self._key_hash = signing_key.to_verification_key().hash().payload.hex()

    async def get_public_key_hash(self) -> str:
        return self._key_hash

    async def sign(self, digest: bytes) -> bytes:
        return self._signing_key.sign(digest)

    def __repr__(self) -> str:
        return f"ExtendedKeySigner(key_hash={self._key_hash})"


class HDWalletSecretManager:
    """Derives signers from a BIP39 mnemonic"""

    def __init__(self, wallet: pc.HDWallet):
        self._wallet = wallet

    @classmethod
    def from_mnemonic(cls, mnemonic: str, passphrase: str = "") -> "HDWalletSecretManager":
        """
        Create a secret manager from a mnemonic

        Args:
            mnemonic: BIP39 mnemonic phrase
            passphrase: Optional BIP39 passphrase

        Returns:
            HDWalletSecretManager instance
        """
        return cls(pc.HDWallet.from_mnemonic(mnemonic, passphrase=passphrase))

    async def get_signer(self, derivation_path: Sequence[int]) -> ExtendedKeySigner:
        key = self._wallet.derive_from_path(format_derivation_path(derivation_path))
        return ExtendedKeySigner(pc.ExtendedSigningKey.from_hdwallet(key))

    def __repr__(self) -> str:
        return "HDWalletSecretManager()"
