"""
Unified Addresses (ZIP 316)

The raw encoding of a Unified Address is the concatenation of its receiver items in ascending typecode order,
followed by a 16-byte padding block holding the human-readable prefix. The raw encoding is passed through F4Jumble
and then written as Bech32m text.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from zcashaddress.core import (Typecode, UNIFIED, NO_PREVIOUS_ITEM, RECEIVER_LENGTHS, get_stream, read_stream,
                               get_logger, LengthError, DuplicateItemError, ItemOrderError, PaddingError,
                               ReceiverConflictError, DataEncodingError)
from zcashaddress.cryptography import f4jumble, f4jumble_inv
from zcashaddress.data import ReceiverItem, read_item_header, bech32_encode, bech32_decode, convertbits, Encoding

__all__ = ["TransparentReceiver", "UnifiedAddress", "padding", "assemble", "disassemble", "encode_unified",
           "decode_unified"]

logger = get_logger(__name__)


def _check_length(typecode: Typecode, payload: bytes):
    if len(payload) != typecode.expected_length:
        raise LengthError(f"{typecode.name} receiver must be {typecode.expected_length} bytes, got {len(payload)}")


@dataclass(frozen=True)
class TransparentReceiver:
    """
    The transparent part of a Unified Address: either a public key hash or a script hash, never both.
    """
    typecode: Typecode
    hash: bytes

    def __post_init__(self):
        if self.typecode not in (Typecode.P2PKH, Typecode.P2SH):
            raise ValueError(f"{self.typecode!r} is not a transparent typecode")
        object.__setattr__(self, "hash", bytes(self.hash))
        _check_length(self.typecode, self.hash)


@dataclass(frozen=True)
class UnifiedAddress:
    """
    An immutable set of receivers. `unknown` maps unrecognized typecodes to their raw payloads.
    """
    transparent: Optional[TransparentReceiver] = None
    sapling: Optional[bytes] = None
    orchard: Optional[bytes] = None
    unknown: Mapping[int, bytes] = field(default_factory=dict)

    def __post_init__(self):
        if self.sapling is not None:
            object.__setattr__(self, "sapling", bytes(self.sapling))
            _check_length(Typecode.SAPLING, self.sapling)
        if self.orchard is not None:
            object.__setattr__(self, "orchard", bytes(self.orchard))
            _check_length(Typecode.ORCHARD, self.orchard)

        unknown = {}
        for typecode, payload in self.unknown.items():
            if typecode < 0:
                raise ValueError(f"Typecode must be non-negative, got {typecode}")
            if typecode in RECEIVER_LENGTHS:
                raise DuplicateItemError(f"Typecode {typecode} is reserved for the {Typecode(typecode).name} receiver")
            unknown[typecode] = bytes(payload)
        object.__setattr__(self, "unknown", MappingProxyType(unknown))

    @classmethod
    def from_receivers(cls, p2pkh: Optional[bytes] = None, p2sh: Optional[bytes] = None,
                       sapling: Optional[bytes] = None, orchard: Optional[bytes] = None,
                       unknown: Optional[dict[int, bytes]] = None) -> "UnifiedAddress":
        """
        Build a UnifiedAddress from individual receivers. A P2PKH and a P2SH receiver cannot both be given.
        """
        if p2pkh is not None and p2sh is not None:
            raise ReceiverConflictError("Both P2PKH and P2SH receivers given for a unified address")
        transparent = None
        if p2pkh is not None:
            transparent = TransparentReceiver(Typecode.P2PKH, p2pkh)
        elif p2sh is not None:
            transparent = TransparentReceiver(Typecode.P2SH, p2sh)
        return cls(transparent, sapling, orchard, dict(unknown or {}))

    @property
    def p2pkh(self) -> Optional[bytes]:
        if self.transparent is not None and self.transparent.typecode == Typecode.P2PKH:
            return self.transparent.hash
        return None

    @property
    def p2sh(self) -> Optional[bytes]:
        if self.transparent is not None and self.transparent.typecode == Typecode.P2SH:
            return self.transparent.hash
        return None

    def items(self) -> list[ReceiverItem]:
        """
        The receivers in wire order: known receivers by typecode, then unknown items sorted by typecode
        """
        items = []
        if self.transparent is not None:
            items.append(ReceiverItem(self.transparent.typecode, self.transparent.hash))
        if self.sapling is not None:
            items.append(ReceiverItem(Typecode.SAPLING, self.sapling))
        if self.orchard is not None:
            items.append(ReceiverItem(Typecode.ORCHARD, self.orchard))
        for typecode in sorted(self.unknown):
            items.append(ReceiverItem(typecode, self.unknown[typecode]))
        return items

    def known_receivers(self) -> "UnifiedAddress":
        """Return a copy without unknown items"""
        return UnifiedAddress(self.transparent, self.sapling, self.orchard)

    def to_dict(self) -> dict:
        return {
            "p2pkh": self.p2pkh.hex() if self.p2pkh is not None else None,
            "p2sh": self.p2sh.hex() if self.p2sh is not None else None,
            "sapling": self.sapling.hex() if self.sapling is not None else None,
            "orchard": self.orchard.hex() if self.orchard is not None else None,
            "unknown": {str(k): v.hex() for k, v in sorted(self.unknown.items())}
        }


def padding(hrp: str) -> bytes:
    """
    The 16-byte padding block: the HRP bytes followed by zeros. An HRP longer than 16 bytes has no valid padding.
    """
    try:
        hrp_bytes = hrp.encode("ascii")
    except UnicodeEncodeError as e:
        raise PaddingError(f"Human-readable prefix {hrp!r} is not ASCII") from e
    if len(hrp_bytes) > UNIFIED.PADDING_LEN:
        raise PaddingError(f"Human-readable prefix {hrp!r} is longer than {UNIFIED.PADDING_LEN} bytes")
    return hrp_bytes + b'\x00' * (UNIFIED.PADDING_LEN - len(hrp_bytes))


def assemble(address: UnifiedAddress, hrp: str) -> bytes:
    """
    Serialize the receivers, append the padding and apply F4Jumble. Returns the bytes for Bech32m encoding.
    """
    raw = b''.join(item.to_bytes() for item in address.items()) + padding(hrp)
    return f4jumble(raw)


def disassemble(data: bytes, expected_hrp: str) -> UnifiedAddress:
    """
    Invert F4Jumble, verify the padding and parse the receiver items into a UnifiedAddress
    """
    if len(data) < UNIFIED.MIN_LEN:
        raise LengthError(f"Unified address data must be at least {UNIFIED.MIN_LEN} bytes, got {len(data)}")

    decoded = f4jumble_inv(data)

    body, suffix = decoded[:-UNIFIED.PADDING_LEN], decoded[-UNIFIED.PADDING_LEN:]
    if suffix != padding(expected_hrp):
        raise PaddingError("Invalid trailing padding")

    stream = get_stream(body)
    receivers = {}
    prev_typecode = NO_PREVIOUS_ITEM
    while stream.tell() < len(body):
        typecode, item_len = read_item_header(stream)
        known = Typecode(typecode) if typecode in RECEIVER_LENGTHS else None

        if known is not None and item_len != known.expected_length:
            raise LengthError(f"Incorrect item length {item_len} for typecode {typecode}")
        if typecode in receivers:
            name = known.item_name if known is not None else "unknown"
            raise DuplicateItemError(f"Duplicate {name} item with typecode {typecode}")
        if prev_typecode != NO_PREVIOUS_ITEM and typecode <= prev_typecode:
            raise ItemOrderError(f"Typecode {typecode} follows typecode {prev_typecode}; items out of order")

        receivers[typecode] = read_stream(stream, item_len, f"receiver with typecode {typecode}")
        prev_typecode = typecode

    logger.debug(f"Parsed unified address typecodes: {list(receivers)}")

    if Typecode.P2PKH in receivers and Typecode.P2SH in receivers:
        raise ReceiverConflictError("Both P2PKH and P2SH items found in unified address")

    unknown = {tc: payload for tc, payload in receivers.items() if tc not in RECEIVER_LENGTHS}
    return UnifiedAddress.from_receivers(
        p2pkh=receivers.get(Typecode.P2PKH),
        p2sh=receivers.get(Typecode.P2SH),
        sapling=receivers.get(Typecode.SAPLING),
        orchard=receivers.get(Typecode.ORCHARD),
        unknown=unknown
    )


def encode_unified(address: UnifiedAddress, hrp: str) -> str:
    """
    Encode a UnifiedAddress to its Bech32m string representation
    """
    jumbled = assemble(address, hrp)
    return bech32_encode(hrp, convertbits(jumbled, 8, 5, pad=True), Encoding.BECH32M)


def decode_unified(encoded: str, expected_hrp: str) -> UnifiedAddress:
    """
    Decode a UnifiedAddress from its Bech32m string. The HRP must equal `expected_hrp`.
    """
    hrp, data, spec = bech32_decode(encoded, max_length=None)
    if spec != Encoding.BECH32M:
        raise DataEncodingError("Unified addresses must be encoded with bech32m")
    if hrp != expected_hrp:
        raise DataEncodingError(f"Expected human-readable prefix {expected_hrp!r}, found {hrp!r}")

    return disassemble(bytes(convertbits(data, 5, 8, pad=False)), expected_hrp)
