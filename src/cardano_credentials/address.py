"""
Address Encoding

Builds pycardano addresses from address requests.
"""

import pycardano as pc

from .exceptions import MissingCredentialError
from .types import AddressRequest, AddressType, Credential, KeyHashCredential, ScriptHashCredential


MAINNET_NETWORK_ID = 1
TESTNET_NETWORK_ID = 0


def network_from_id(network_id: int) -> pc.Network:
    """Map a ledger network id to a pycardano network"""
    return pc.Network.MAINNET if network_id == MAINNET_NETWORK_ID else pc.Network.TESTNET


def network_id_from_name(network: str) -> int:
    """Map "mainnet"/"testnet" to a ledger network id"""
    if network == "mainnet":
        return MAINNET_NETWORK_ID
    if network == "testnet":
        return TESTNET_NETWORK_ID
    raise ValueError(f"Unknown network: {network}")


def credential_to_pycardano(credential: Credential):
    """Convert a credential to a pycardano key or script hash"""
    if isinstance(credential, KeyHashCredential):
        return pc.VerificationKeyHash(bytes.fromhex(credential.hash))
    if isinstance(credential, ScriptHashCredential):
        return pc.ScriptHash(bytes.fromhex(credential.hash))
    raise TypeError(f"Unknown credential type: {type(credential).__name__}")


def to_pycardano_address(request: AddressRequest) -> pc.Address:
    """
    Encode an address request as a pycardano Address

    Args:
        request: Request produced by the address manager

    Returns:
        pycardano Address (str() gives the bech32 form)

    Raises:
        MissingCredentialError: If a base or reward address has no stake credential
    """
    network = network_from_id(request.network_id)

    if request.address_type is AddressType.ENTERPRISE:
        return pc.Address(payment_part=credential_to_pycardano(request.payment_credential), network=network)

    if request.stake_credential is None:
        raise MissingCredentialError(f"{request.address_type.value} address requires a stake credential")
    staking_part = credential_to_pycardano(request.stake_credential)

    if request.address_type is AddressType.BASE:
        return pc.Address(
            payment_part=credential_to_pycardano(request.payment_credential),
            staking_part=staking_part,
            network=network,
        )
    if request.address_type is AddressType.REWARD:
        return pc.Address(staking_part=staking_part, network=network)
    raise TypeError(f"Unknown address type: {request.address_type!r}")
