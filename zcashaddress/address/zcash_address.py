"""
The ZcashAddress type and the decoder which recognizes every Zcash address encoding.

Formats are tried in a fixed order and the first structural success wins:
    1) Base58Check transparent P2PKH / P2SH
    2) Bech32m TEX (ZIP 320) or Bech32 Sapling
    3) Bech32m Unified Address
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from zcashaddress.address.network import Network
from zcashaddress.address.unified import UnifiedAddress, encode_unified, decode_unified
from zcashaddress.core import (DATA, BASE58, get_logger, ZcashAddressError, DataEncodingError, LengthError,
                               UnsupportedAddressError, AddressDecodeError)
from zcashaddress.cryptography import hash160
from zcashaddress.data import (encode_base58check, decode_base58check, bech32_encode, bech32_decode, convertbits,
                               Encoding)

__all__ = ["AddressKind", "ZcashAddress", "decode_address", "encode_address", "decode_p2pkh", "decode_p2sh",
           "decode_sapling", "decode_orchard"]

logger = get_logger(__name__)

# Format names used in AddressDecodeError.attempts
BASE58_FORMAT = "base58check"
BECH32_FORMAT = "bech32"
UNIFIED_FORMAT = "unified"


class AddressKind(Enum):
    P2PKH = "p2pkh"
    P2SH = "p2sh"
    SAPLING = "sapling"
    TEX = "tex"
    UNIFIED = "unified"


_PAYLOAD_LENGTHS = {
    AddressKind.P2PKH: DATA.HASH160,
    AddressKind.P2SH: DATA.HASH160,
    AddressKind.SAPLING: DATA.SHIELDED_RECEIVER,
    AddressKind.TEX: DATA.HASH160,
}


@dataclass(frozen=True)
class ZcashAddress:
    """
    A parsed Zcash address. Exactly one kind of address is held; the matching property returns its payload and the
    others return None.
    """
    kind: AddressKind
    payload: bytes | UnifiedAddress

    def __post_init__(self):
        if self.kind == AddressKind.UNIFIED:
            if not isinstance(self.payload, UnifiedAddress):
                raise TypeError(f"Expected UnifiedAddress but received: {type(self.payload)}")
            return
        expected = _PAYLOAD_LENGTHS[self.kind]
        if len(self.payload) != expected:
            raise LengthError(f"{self.kind.value} address data must be {expected} bytes, got {len(self.payload)}")
        object.__setattr__(self, "payload", bytes(self.payload))

    # --- CONSTRUCTORS --- #

    @classmethod
    def from_p2pkh(cls, pubkey_hash: bytes) -> "ZcashAddress":
        return cls(AddressKind.P2PKH, pubkey_hash)

    @classmethod
    def from_p2sh(cls, script_hash: bytes) -> "ZcashAddress":
        return cls(AddressKind.P2SH, script_hash)

    @classmethod
    def from_sapling(cls, receiver: bytes) -> "ZcashAddress":
        return cls(AddressKind.SAPLING, receiver)

    @classmethod
    def from_tex(cls, pubkey_hash: bytes) -> "ZcashAddress":
        return cls(AddressKind.TEX, pubkey_hash)

    @classmethod
    def from_unified(cls, address: UnifiedAddress) -> "ZcashAddress":
        return cls(AddressKind.UNIFIED, address)

    @classmethod
    def p2pkh_from_pubkey(cls, pubkey: bytes) -> "ZcashAddress":
        """P2PKH address paying to HASH160 of a serialized public key"""
        return cls.from_p2pkh(hash160(pubkey))

    @classmethod
    def p2sh_from_script(cls, redeem_script: bytes) -> "ZcashAddress":
        """P2SH address paying to HASH160 of a redeem script"""
        return cls.from_p2sh(hash160(redeem_script))

    # --- PAYLOAD ACCESS --- #

    def _payload_if(self, kind: AddressKind):
        return self.payload if self.kind == kind else None

    @property
    def p2pkh(self) -> Optional[bytes]:
        return self._payload_if(AddressKind.P2PKH)

    @property
    def p2sh(self) -> Optional[bytes]:
        return self._payload_if(AddressKind.P2SH)

    @property
    def sapling(self) -> Optional[bytes]:
        return self._payload_if(AddressKind.SAPLING)

    @property
    def tex(self) -> Optional[bytes]:
        return self._payload_if(AddressKind.TEX)

    @property
    def unified(self) -> Optional[UnifiedAddress]:
        return self._payload_if(AddressKind.UNIFIED)

    def to_dict(self) -> dict:
        if self.kind == AddressKind.UNIFIED:
            payload = self.payload.to_dict()
        else:
            payload = self.payload.hex()
        return {"kind": self.kind.value, "payload": payload}


# --- DECODING --- #

def _shielded_bytes(data: list[int], expected_len: int, name: str) -> bytes:
    # The prefix already matched, so a malformed payload is decided here
    try:
        converted = bytes(convertbits(data, 5, 8, pad=False))
    except DataEncodingError as e:
        raise LengthError(f"{name} address data is not a whole number of bytes: {e}") from e
    if len(converted) != expected_len:
        raise LengthError(f"{name} address data must be {expected_len} bytes, got {len(converted)}")
    return converted


def _try_base58(address: str, network: Network) -> ZcashAddress:
    decoded = decode_base58check(address)
    if len(decoded) == BASE58.VERSION_LEN + DATA.HASH160:
        lead, body = decoded[:BASE58.VERSION_LEN], decoded[BASE58.VERSION_LEN:]
        if lead == network.p2pkh_lead:
            return ZcashAddress.from_p2pkh(body)
        if lead == network.p2sh_lead:
            return ZcashAddress.from_p2sh(body)
    raise DataEncodingError(f"Base58Check payload {decoded[:BASE58.VERSION_LEN].hex()}... is not a transparent "
                            f"address on {network.name}")


def _try_bech32(address: str, network: Network) -> ZcashAddress:
    # ZIP 173 lifts the 90 character limit for Zcash Bech32 strings
    hrp, data, spec = bech32_decode(address, max_length=None)
    if spec == Encoding.BECH32M:
        if hrp == network.tex_hrp:
            return ZcashAddress.from_tex(_shielded_bytes(data, DATA.HASH160, "tex"))
        if hrp == network.unified_r1_hrp:
            raise UnsupportedAddressError("Unified address revision 1 decoding is not supported")
    elif hrp == network.sapling_hrp:
        return ZcashAddress.from_sapling(_shielded_bytes(data, DATA.SHIELDED_RECEIVER, "sapling"))
    raise DataEncodingError(f"No {spec.name.lower()} address with prefix {hrp!r} on {network.name}")


def decode_address(address: str, network: Network) -> ZcashAddress:
    """
    Decode any Zcash address string for the given network.

    A Bech32 string whose prefix names a TEX, Sapling or revision 1 Unified Address is decided at that stage, and
    its errors are raised directly. When no format matches, AddressDecodeError lists the failure of each attempt.
    """
    attempts = []

    try:
        return _try_base58(address, network)
    except DataEncodingError as e:
        logger.debug(f"Not a base58check address: {e}")
        attempts.append((BASE58_FORMAT, e))

    try:
        return _try_bech32(address, network)
    except DataEncodingError as e:
        logger.debug(f"Not a bech32 address: {e}")
        attempts.append((BECH32_FORMAT, e))

    try:
        return ZcashAddress.from_unified(decode_unified(address, network.unified_hrp))
    except ZcashAddressError as e:
        logger.debug(f"Not a unified address: {e}")
        attempts.append((UNIFIED_FORMAT, e))

    raise AddressDecodeError(attempts)


# --- ENCODING --- #

def encode_address(address: ZcashAddress, network: Network) -> str:
    """
    Encode a ZcashAddress in the text format of its kind
    """
    match address.kind:
        case AddressKind.P2PKH:
            return encode_base58check(network.p2pkh_lead + address.payload)
        case AddressKind.P2SH:
            return encode_base58check(network.p2sh_lead + address.payload)
        case AddressKind.SAPLING:
            return bech32_encode(network.sapling_hrp, convertbits(address.payload, 8, 5), Encoding.BECH32)
        case AddressKind.TEX:
            return bech32_encode(network.tex_hrp, convertbits(address.payload, 8, 5), Encoding.BECH32M)
        case _:
            return encode_unified(address.payload, network.unified_hrp)


# --- CONVENIENCE DECODERS --- #

def decode_p2pkh(address: str, network: Network, allow_tex: bool = False) -> Optional[bytes]:
    """
    Return the 20-byte public key hash of:
        -a base58 P2PKH address
        -the P2PKH receiver of a Unified Address
        -a TEX address, if `allow_tex` is True

    Returns None if the address holds no transparent public key hash.
    """
    decoded = decode_address(address, network)
    if decoded.p2pkh is not None:
        return decoded.p2pkh
    if decoded.unified is not None:
        return decoded.unified.known_receivers().p2pkh
    if allow_tex:
        return decoded.tex
    return None


def decode_p2sh(address: str, network: Network) -> Optional[bytes]:
    """
    Return the 20-byte script hash of a base58 P2SH address or of the P2SH receiver of a Unified Address
    """
    decoded = decode_address(address, network)
    if decoded.p2sh is not None:
        return decoded.p2sh
    if decoded.unified is not None:
        return decoded.unified.known_receivers().p2sh
    return None


def decode_sapling(address: str, network: Network) -> Optional[bytes]:
    """
    Return the 43-byte Sapling receiver of a Sapling address or of a Unified Address
    """
    decoded = decode_address(address, network)
    if decoded.sapling is not None:
        return decoded.sapling
    if decoded.unified is not None:
        return decoded.unified.known_receivers().sapling
    return None


def decode_orchard(address: str, network: Network) -> Optional[bytes]:
    """
    Return the 43-byte Orchard receiver of a Unified Address. Orchard has no standalone encoding.
    """
    decoded = decode_address(address, network)
    if decoded.unified is not None:
        return decoded.unified.known_receivers().orchard
    return None
