"""
Capability Interfaces

Narrow async interfaces the credential layer consumes. Implementations
own key material and derivation; this package only ever calls them.
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Signer(Protocol):
    """Produces a public key hash and signatures without exposing the key"""

    async def get_public_key_hash(self) -> str:
        """Hex encoded blake2b-224 hash of the verification key"""
        ...

    async def sign(self, digest: bytes) -> bytes:
        """Sign a digest (usually a transaction body hash)"""
        ...


@runtime_checkable
class SecretManager(Protocol):
    """Deterministically derives a Signer for a derivation path"""

    async def get_signer(self, derivation_path: Sequence[int]) -> Signer:
        ...
