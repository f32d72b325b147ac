"""
Hash functions and the F4Jumble permutation
"""
# cryptography/__init__.py

from zcashaddress.cryptography.f4jumble import *
from zcashaddress.cryptography.hash_functions import *
