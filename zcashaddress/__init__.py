"""
Parsing and serialization of Zcash addresses

    -Base58Check transparent P2PKH and P2SH addresses
    -Bech32 Sapling addresses
    -Bech32m ZIP 320 TEX addresses
    -Unified Addresses (ZIP 316)
"""
# zcashaddress/__init__.py
from zcashaddress.address import *
from zcashaddress.core.exceptions import *

__version__ = "0.1.0"
