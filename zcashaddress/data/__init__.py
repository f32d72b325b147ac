"""
All methods for manipulating and representing address data

    -CompactSize integers
    -Typed length-prefixed (TLV) receiver items
    -Base58Check and Bech32/Bech32m text encodings
"""

# data/__init__.py
from zcashaddress.data.codec import *
from zcashaddress.data.compact_size import *
from zcashaddress.data.tlv import *
