"""
Pytest configuration for credential tests

Shared signers, secret managers and address sources.
"""

from pathlib import Path

import pycardano as pc
import pytest
from dotenv import load_dotenv

from cardano_credentials import (
    CredentialsSource,
    HDWalletSecretManager,
    ScriptHashSource,
    SecretManagerSource,
    SignerSource,
)
from tests.mocks import MockSecretManager, MockSigner, make_key_hash


@pytest.fixture(scope="session", autouse=True)
def load_env():
    """Load test environment variables"""
    env_file = Path(__file__).parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    yield


@pytest.fixture(scope="session")
def mnemonic():
    """Fresh 24-word mnemonic shared across the session"""
    return pc.HDWallet.generate_mnemonic(strength=256)


@pytest.fixture
def hd_secret_manager(mnemonic):
    return HDWalletSecretManager.from_mnemonic(mnemonic)


@pytest.fixture
def mock_secret_manager():
    return MockSecretManager()


@pytest.fixture
def payment_signer():
    return MockSigner(make_key_hash("payment"))


@pytest.fixture
def stake_signer():
    return MockSigner(make_key_hash("stake"))


@pytest.fixture
def drep_signer():
    return MockSigner(make_key_hash("drep"))


@pytest.fixture
def script_hash():
    """Sample script hash"""
    return "abcd1234" * 7


@pytest.fixture
def secret_manager_source(mock_secret_manager):
    return SecretManagerSource(mock_secret_manager)


@pytest.fixture
def explicit_source(payment_signer, stake_signer, drep_signer):
    """Explicit source with a signer for every role"""
    return CredentialsSource(
        payment=SignerSource(payment_signer),
        stake=SignerSource(stake_signer),
        drep=SignerSource(drep_signer),
    )


@pytest.fixture
def script_stake_source(payment_signer, script_hash):
    """Explicit source with a script hash stake credential"""
    return CredentialsSource(payment=SignerSource(payment_signer), stake=ScriptHashSource(script_hash))
