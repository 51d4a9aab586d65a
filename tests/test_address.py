"""
Tests for pycardano address encoding
"""

import pycardano as pc
import pytest

from cardano_credentials import (
    AddressManager,
    AddressManagerConfig,
    AddressRequest,
    AddressType,
    KeyHashCredential,
    MissingCredentialError,
    ScriptHashCredential,
    to_pycardano_address,
)
from cardano_credentials.address import network_from_id, network_id_from_name
from tests.mocks import make_key_hash


PAYMENT = KeyHashCredential(make_key_hash("payment"))
STAKE = KeyHashCredential(make_key_hash("stake"))


class TestNetworks:
    def test_network_ids(self):
        assert network_from_id(0) == pc.Network.TESTNET
        assert network_from_id(1) == pc.Network.MAINNET
        assert network_id_from_name("testnet") == 0
        assert network_id_from_name("mainnet") == 1

    def test_unknown_network_name(self):
        with pytest.raises(ValueError):
            network_id_from_name("preprod")


class TestToPycardanoAddress:
    def test_enterprise(self):
        address = to_pycardano_address(AddressRequest(AddressType.ENTERPRISE, 0, PAYMENT))

        assert address.payment_part == pc.VerificationKeyHash(bytes.fromhex(PAYMENT.hash))
        assert address.staking_part is None
        assert address.network == pc.Network.TESTNET
        assert str(address).startswith("addr_test1")

    def test_base_mainnet(self):
        address = to_pycardano_address(AddressRequest(AddressType.BASE, 1, PAYMENT, STAKE))

        assert address.payment_part == pc.VerificationKeyHash(bytes.fromhex(PAYMENT.hash))
        assert address.staking_part == pc.VerificationKeyHash(bytes.fromhex(STAKE.hash))
        assert str(address).startswith("addr1")

    def test_base_with_script_stake(self):
        script = ScriptHashCredential(make_key_hash("script"))
        address = to_pycardano_address(AddressRequest(AddressType.BASE, 0, PAYMENT, script))

        assert address.staking_part == pc.ScriptHash(bytes.fromhex(script.hash))

    def test_reward(self):
        address = to_pycardano_address(AddressRequest(AddressType.REWARD, 0, PAYMENT, STAKE))

        assert address.payment_part is None
        assert address.staking_part == pc.VerificationKeyHash(bytes.fromhex(STAKE.hash))
        assert str(address).startswith("stake_test1")

    @pytest.mark.parametrize("address_type", [AddressType.BASE, AddressType.REWARD])
    def test_missing_stake(self, address_type):
        with pytest.raises(MissingCredentialError):
            to_pycardano_address(AddressRequest(address_type, 0, PAYMENT))

    @pytest.mark.asyncio
    async def test_manager_requests_encode(self, secret_manager_source):
        manager = await AddressManager.create(AddressManagerConfig(address_source=secret_manager_source, network_id=0))

        base = to_pycardano_address(manager.get_next_address(AddressType.BASE))
        enterprise = to_pycardano_address(manager.get_next_address(AddressType.ENTERPRISE))
        reward = to_pycardano_address(manager.get_reward_account())

        assert base.payment_part == enterprise.payment_part
        assert base.staking_part == reward.staking_part
