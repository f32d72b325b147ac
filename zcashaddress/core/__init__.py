"""
Contains the core elements that are used within zcashaddress

Core:
    -Provides the byte stream helpers used by every decoder
    -Provides the reference formats and protocol constants
    -Provides custom exceptions for the address codecs
"""
# core/__init__.py
from zcashaddress.core.byte_stream import *
from zcashaddress.core.exceptions import *
from zcashaddress.core.formats import *
from zcashaddress.core.logging import *
from zcashaddress.core.serializable import *
