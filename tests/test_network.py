"""
Tests for the network parameters
"""
import pytest

from zcashaddress.address import MAINNET, TESTNET, REGTEST, get_network


@pytest.mark.parametrize("name, expected", [
    ("main", MAINNET),
    ("Mainnet", MAINNET),
    ("test", TESTNET),
    ("testnet", TESTNET),
    ("regtest", REGTEST),
])
def test_get_network(name, expected):
    assert get_network(name) is expected


def test_get_network_unknown():
    with pytest.raises(ValueError):
        get_network("signet")


def test_network_constants():
    assert MAINNET.p2pkh_lead == b'\x1c\xb8'
    assert MAINNET.unified_hrp == "u"
    assert TESTNET.sapling_hrp == "ztestsapling"
    assert REGTEST.unified_r1_hrp == "urregtest"
    # Every unified prefix fits in the 16-byte padding block
    for network in (MAINNET, TESTNET, REGTEST):
        assert len(network.unified_hrp) <= 16


def test_network_immutable():
    with pytest.raises(AttributeError):
        MAINNET.unified_hrp = "x"
