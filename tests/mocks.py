"""
Mock Capabilities for Credential Testing

In-memory Signer and SecretManager implementations that record calls.
"""

import asyncio
import hashlib
from typing import List, Sequence


def make_key_hash(seed: str) -> str:
    """Deterministic 28-byte hex hash for a seed"""
    return hashlib.blake2b(seed.encode(), digest_size=28).hexdigest()


class MockSigner:
    """Signer with a fixed key hash that records every call"""

    def __init__(self, key_hash: str):
        self.key_hash = key_hash
        self.hash_calls = 0
        self.signed: List[bytes] = []

    async def get_public_key_hash(self) -> str:
        self.hash_calls += 1
        await asyncio.sleep(0)
        return self.key_hash

    async def sign(self, digest: bytes) -> bytes:
        self.signed.append(digest)
        return hashlib.sha512(bytes.fromhex(self.key_hash) + digest).digest()[:64]


class FailingSigner:
    """Signer whose hash lookup always fails"""

    def __init__(self, error: Exception):
        self.error = error

    async def get_public_key_hash(self) -> str:
        raise self.error

    async def sign(self, digest: bytes) -> bytes:
        raise self.error


class MockSecretManager:
    """Secret manager deriving one MockSigner per path"""

    def __init__(self, seed: str = "mock-seed"):
        self.seed = seed
        self.requested_paths: List[tuple] = []

    async def get_signer(self, derivation_path: Sequence[int]) -> MockSigner:
        path = tuple(derivation_path)
        self.requested_paths.append(path)
        await asyncio.sleep(0)
        return MockSigner(make_key_hash(f"{self.seed}:{path}"))


class FailingSecretManager:
    """Secret manager that fails for one chosen role index"""

    def __init__(self, failing_role: int, error: Exception):
        self.failing_role = failing_role
        self.error = error
        self._inner = MockSecretManager()

    async def get_signer(self, derivation_path: Sequence[int]) -> MockSigner:
        if derivation_path[3] == self.failing_role:
            raise self.error
        return await self._inner.get_signer(derivation_path)
