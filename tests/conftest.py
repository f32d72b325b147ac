"""
Fixtures used in the tests
"""
import pytest

from zcashaddress.address import MAINNET, TESTNET, REGTEST, UnifiedAddress
from tests.utility import random_shielded_receiver, random_hash


@pytest.fixture(params=[MAINNET, TESTNET, REGTEST], ids=lambda n: n.name)
def network(request):
    return request.param


@pytest.fixture()
def sapling_only():
    return UnifiedAddress(sapling=random_shielded_receiver())


@pytest.fixture()
def full_unified():
    return UnifiedAddress.from_receivers(
        p2pkh=random_hash(),
        sapling=random_shielded_receiver(),
        orchard=random_shielded_receiver(),
        unknown={0x1000: b'\x01\x02', 0x05: b''}
    )
