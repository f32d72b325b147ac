"""
Address prefix and lead-byte constants for the Zcash networks
"""
from dataclasses import dataclass

__all__ = ["Network", "MAINNET", "TESTNET", "REGTEST", "get_network"]


@dataclass(frozen=True)
class Network:
    name: str
    p2pkh_lead: bytes
    p2sh_lead: bytes
    tex_hrp: str
    sapling_hrp: str
    unified_hrp: str
    unified_r1_hrp: str


MAINNET = Network(
    name="main",
    p2pkh_lead=bytes.fromhex("1cb8"),
    p2sh_lead=bytes.fromhex("1cbd"),
    tex_hrp="tex",
    sapling_hrp="zs",
    unified_hrp="u",
    unified_r1_hrp="ur",
)

TESTNET = Network(
    name="test",
    p2pkh_lead=bytes.fromhex("1d25"),
    p2sh_lead=bytes.fromhex("1cba"),
    tex_hrp="textest",
    sapling_hrp="ztestsapling",
    unified_hrp="utest",
    unified_r1_hrp="urtest",
)

REGTEST = Network(
    name="regtest",
    p2pkh_lead=bytes.fromhex("1c25"),
    p2sh_lead=bytes.fromhex("1cba"),
    tex_hrp="texregtest",
    sapling_hrp="zregtestsapling",
    unified_hrp="uregtest",
    unified_r1_hrp="urregtest",
)

_NETWORKS = {
    "main": MAINNET,
    "mainnet": MAINNET,
    "test": TESTNET,
    "testnet": TESTNET,
    "regtest": REGTEST,
}


def get_network(name: str) -> Network:
    """Lookup a Network by name"""
    try:
        return _NETWORKS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown network {name!r}. Expected one of {sorted(_NETWORKS)}") from None
