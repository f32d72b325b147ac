"""
Zcash address types and the multi-format address decoder
"""
# address/__init__.py
from zcashaddress.address.network import *
from zcashaddress.address.unified import *
from zcashaddress.address.zcash_address import *
