"""
Methods for encoding and decoding address text

    -Base58Check, used by transparent addresses
    -Bech32 (BIP 173) and Bech32m (BIP 350), used by shielded, TEX and Unified Addresses
"""
from enum import Enum
from typing import Iterable, Optional, Sequence

from zcashaddress.core import BASE58, BECH32, DataEncodingError, get_logger
from zcashaddress.cryptography.hash_functions import hash256

__all__ = ["encode_base58", "decode_base58", "encode_base58check", "decode_base58check", "Encoding", "bech32_encode",
           "bech32_decode", "convertbits"]

logger = get_logger(__name__)


# --- BASE58 ENCODING --- #

def encode_base58(data: bytes) -> str:
    """
    Given bytes we return a base58 encoded string. Each leading zero byte is written as '1'.
    """
    base = len(BASE58.ALPHABET)
    n = int.from_bytes(data, "big")
    encoded_string = ""

    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58.ALPHABET[temp_index] + encoded_string

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(text: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes
    """
    total = 0
    for char in text:
        char_i = BASE58.ALPHABET.find(char)
        if char_i < 0:
            raise DataEncodingError(f"Invalid base58 character {char!r}")
        total = total * 58 + char_i

    # Each leading '1' represents a leading zero byte
    leading_zeros = len(text) - len(text.lstrip("1"))
    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    return b'\x00' * leading_zeros + body


def encode_base58check(payload: bytes) -> str:
    """
    Append the first 4 bytes of HASH256(payload) and base58 encode the result
    """
    checksum = hash256(payload)[:BASE58.CHECKSUM_LEN]
    return encode_base58(payload + checksum)


def decode_base58check(text: str) -> bytes:
    """
    Given a string of base58Check chars, we verify the checksum and return the payload (version bytes included)
    """
    if not text:
        raise DataEncodingError("Empty base58 string")
    decoded = decode_base58(text)
    if len(decoded) < BASE58.CHECKSUM_LEN:
        raise DataEncodingError("Base58Check data shorter than its checksum")
    payload, checksum = decoded[:-BASE58.CHECKSUM_LEN], decoded[-BASE58.CHECKSUM_LEN:]
    if hash256(payload)[:BASE58.CHECKSUM_LEN] != checksum:
        raise DataEncodingError("Decoded checksum does not equal given checksum")
    return payload


# --- BECH32 ENCODING --- #

class Encoding(Enum):
    """Enumeration type to list the various supported encodings."""
    BECH32 = 1
    BECH32M = 2


_GENERATORS = (0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3)
_CHARSET_REV = {c: i for i, c in enumerate(BECH32.CHARSET)}


def _polymod(values: Sequence[int]) -> int:
    chk = 1
    for v in values:
        top = chk >> 25
        chk = ((chk & 0x1ffffff) << 5) ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GENERATORS[i]
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def _checksum_const(spec: Encoding) -> int:
    return BECH32.BECH32M_CONST if spec == Encoding.BECH32M else BECH32.BECH32_CONST


def _create_checksum(hrp: str, data: Sequence[int], spec: Encoding) -> list[int]:
    values = _hrp_expand(hrp) + list(data)
    polymod = _polymod(values + [0] * BECH32.CHECKSUM_LEN) ^ _checksum_const(spec)
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(BECH32.CHECKSUM_LEN)]


def bech32_encode(hrp: str, data: Sequence[int], spec: Encoding) -> str:
    """
    Compute a Bech32 or Bech32m string given the HRP and 5-bit data values.
    """
    if not hrp or any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise DataEncodingError(f"Invalid human-readable prefix {hrp!r}")
    if any(d < 0 or d > 31 for d in data):
        raise DataEncodingError("Bech32 data values must be 5-bit")
    hrp = hrp.lower()
    combined = list(data) + _create_checksum(hrp, data, spec)
    return hrp + "1" + "".join(BECH32.CHARSET[d] for d in combined)


def bech32_decode(bech: str, max_length: Optional[int] = BECH32.MAX_LEN) -> tuple[str, list[int], Encoding]:
    """
    Validate a Bech32/Bech32m string and determine the HRP, the 5-bit data (checksum removed) and the checksum variant.

    Pass `max_length=None` to lift the 90 character limit, as Unified Addresses require.
    """
    if any(ord(x) < 33 or ord(x) > 126 for x in bech):
        raise DataEncodingError("Bech32 string contains invalid characters")
    if bech.lower() != bech and bech.upper() != bech:
        raise DataEncodingError("Mixed-case Bech32 string")
    if max_length is not None and len(bech) > max_length:
        raise DataEncodingError(f"Bech32 string exceeds {max_length} characters")

    bech = bech.lower()
    pos = bech.rfind("1")
    if pos < 1 or pos + BECH32.CHECKSUM_LEN + 1 > len(bech):
        raise DataEncodingError("Invalid position of Bech32 separator")

    hrp = bech[:pos]
    try:
        data = [_CHARSET_REV[c] for c in bech[pos + 1:]]
    except KeyError as e:
        raise DataEncodingError(f"Invalid Bech32 data character {e.args[0]!r}") from e

    const = _polymod(_hrp_expand(hrp) + data)
    if const == BECH32.BECH32_CONST:
        spec = Encoding.BECH32
    elif const == BECH32.BECH32M_CONST:
        spec = Encoding.BECH32M
    else:
        raise DataEncodingError("Invalid Bech32 checksum")

    return hrp, data[:-BECH32.CHECKSUM_LEN], spec


def convertbits(data: Iterable[int], frombits: int, tobits: int, pad: bool = True) -> list[int]:
    """
    General power-of-2 base conversion.

    With pad=False the leftover bits must be fewer than `frombits` and all zero.
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise DataEncodingError(f"Value {value} does not fit in {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        logger.debug(f"Invalid padding: {bits} leftover bits")
        raise DataEncodingError("Invalid padding in bit conversion")
    return ret
