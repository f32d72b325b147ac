"""
The Zcash address formats and protocol constants
"""
from enum import IntEnum
from typing import Final

__all__ = ["DATA", "UNIFIED", "F4JUMBLE", "BASE58", "BECH32", "Typecode", "RECEIVER_LENGTHS", "NO_PREVIOUS_ITEM"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0x2000000
    MAX_U64: Final[int] = 0xffffffffffffffff
    HASH160: Final[int] = 20
    SHIELDED_RECEIVER: Final[int] = 43


class UNIFIED:
    """
    Unified Address layout (ZIP 316)
    """
    PADDING_LEN: Final[int] = 16
    MIN_LEN: Final[int] = 48


class F4JUMBLE:
    MIN_LEN: Final[int] = 48
    MAX_LEN: Final[int] = 4194368
    HASH_LEN: Final[int] = 64
    H_PERSONAL: Final[bytes] = b"UA_F4Jumble_H"
    G_PERSONAL: Final[bytes] = b"UA_F4Jumble_G"


class BASE58:
    ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    CHECKSUM_LEN: Final[int] = 4
    VERSION_LEN: Final[int] = 2


class BECH32:
    CHARSET: Final[str] = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
    CHECKSUM_LEN: Final[int] = 6
    MAX_LEN: Final[int] = 90
    BECH32_CONST: Final[int] = 1
    BECH32M_CONST: Final[int] = 0x2bc830a3


class Typecode(IntEnum):
    """
    Receiver typecodes with a reserved meaning. Every other value is an unknown item.
    """
    P2PKH = 0x00
    P2SH = 0x01
    SAPLING = 0x02
    ORCHARD = 0x03

    @property
    def expected_length(self) -> int:
        return RECEIVER_LENGTHS[self]

    @property
    def item_name(self) -> str:
        match self:
            case Typecode.P2PKH | Typecode.P2SH:
                return "transparent"
            case Typecode.SAPLING:
                return "sapling"
            case _:
                return "orchard"


RECEIVER_LENGTHS: Final[dict] = {
    Typecode.P2PKH: DATA.HASH160,
    Typecode.P2SH: DATA.HASH160,
    Typecode.SAPLING: DATA.SHIELDED_RECEIVER,
    Typecode.ORCHARD: DATA.SHIELDED_RECEIVER,
}

# Seeds the ordering check; larger than any typecode a CompactSize can carry
NO_PREVIOUS_ITEM: Final[int] = DATA.MAX_U64 + 1
