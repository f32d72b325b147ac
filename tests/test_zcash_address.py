"""
Tests for the multi-format address decoder and encoder
"""
from secrets import token_bytes

import pytest

from zcashaddress.address import (MAINNET, TESTNET, AddressKind, UnifiedAddress, ZcashAddress, decode_address,
                                  encode_address, encode_unified, decode_p2pkh, decode_p2sh, decode_sapling,
                                  decode_orchard)
from zcashaddress.core import (AddressDecodeError, DataEncodingError, LengthError, UnsupportedAddressError,
                               ZcashAddressError)
from zcashaddress.cryptography import hash160
from zcashaddress.data import bech32_encode, convertbits, Encoding
from tests.utility import random_hash, random_shielded_receiver, random_unified_address


def _random_address(kind: AddressKind) -> ZcashAddress:
    match kind:
        case AddressKind.P2PKH:
            return ZcashAddress.from_p2pkh(random_hash())
        case AddressKind.P2SH:
            return ZcashAddress.from_p2sh(random_hash())
        case AddressKind.SAPLING:
            return ZcashAddress.from_sapling(random_shielded_receiver())
        case AddressKind.TEX:
            return ZcashAddress.from_tex(random_hash())
        case _:
            return ZcashAddress.from_unified(random_unified_address())


@pytest.mark.parametrize("kind", list(AddressKind))
def test_address_codec(kind, network):
    address = _random_address(kind)
    encoded = encode_address(address, network)
    decoded = decode_address(encoded, network)

    assert decoded == address
    assert decoded.kind == kind


@pytest.mark.parametrize("kind, prefix", [
    (AddressKind.P2PKH, "t1"),
    (AddressKind.P2SH, "t3"),
    (AddressKind.SAPLING, "zs1"),
    (AddressKind.TEX, "tex1"),
    (AddressKind.UNIFIED, "u1"),
])
def test_mainnet_prefixes(kind, prefix):
    assert encode_address(_random_address(kind), MAINNET).startswith(prefix)


def test_testnet_p2pkh_prefix():
    assert encode_address(_random_address(AddressKind.P2PKH), TESTNET).startswith("tm")


def test_sapling_only_unified_end_to_end():
    receiver = random_shielded_receiver()
    encoded = encode_unified(UnifiedAddress(sapling=receiver), "u")
    decoded = decode_address(encoded, MAINNET)

    assert decoded.kind == AddressKind.UNIFIED
    assert decoded.unified.sapling == receiver
    assert decoded.unified.transparent is None
    assert decoded.unified.orchard is None
    assert decoded.unified.unknown == {}
    assert decoded.p2pkh is None and decoded.sapling is None


def test_payload_properties_exclusive():
    address = ZcashAddress.from_tex(random_hash())
    assert address.tex == address.payload
    assert address.p2pkh is None
    assert address.p2sh is None
    assert address.sapling is None
    assert address.unified is None


def test_constructor_lengths():
    with pytest.raises(LengthError):
        ZcashAddress.from_p2pkh(token_bytes(19))
    with pytest.raises(LengthError):
        ZcashAddress.from_sapling(token_bytes(20))
    with pytest.raises(TypeError):
        ZcashAddress(AddressKind.UNIFIED, random_hash())


def test_hash160_constructors():
    pubkey = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
    script = token_bytes(71)
    assert ZcashAddress.p2pkh_from_pubkey(pubkey).p2pkh == hash160(pubkey)
    assert ZcashAddress.p2sh_from_script(script).p2sh == hash160(script)


def test_to_dict():
    address = ZcashAddress.from_unified(UnifiedAddress(orchard=bytes(43)))
    assert address.to_dict() == {
        "kind": "unified",
        "payload": {"p2pkh": None, "p2sh": None, "sapling": None, "orchard": "00" * 43, "unknown": {}}
    }


# --- DECODING FAILURES --- #

def test_tex_wrong_length():
    encoded = bech32_encode(MAINNET.tex_hrp, convertbits(token_bytes(19), 8, 5), Encoding.BECH32M)
    with pytest.raises(LengthError):
        decode_address(encoded, MAINNET)


def test_sapling_wrong_length():
    encoded = bech32_encode(MAINNET.sapling_hrp, convertbits(token_bytes(42), 8, 5), Encoding.BECH32)
    with pytest.raises(LengthError):
        decode_address(encoded, MAINNET)


def test_unified_revision_one_unsupported(network):
    encoded = bech32_encode(network.unified_r1_hrp, convertbits(token_bytes(20), 8, 5), Encoding.BECH32M)
    with pytest.raises(UnsupportedAddressError):
        decode_address(encoded, network)


def test_garbage_reports_every_attempt():
    with pytest.raises(AddressDecodeError) as exc_info:
        decode_address("not an address", MAINNET)

    attempts = exc_info.value.attempts
    assert [name for name, _ in attempts] == ["base58check", "bech32", "unified"]
    assert all(isinstance(err, ZcashAddressError) for _, err in attempts)
    assert exc_info.value.error_for("bech32") is attempts[1][1]
    assert exc_info.value.error_for("nothing") is None


def test_wrong_network_transparent():
    encoded = encode_address(ZcashAddress.from_p2pkh(random_hash()), MAINNET)
    with pytest.raises(AddressDecodeError) as exc_info:
        decode_address(encoded, TESTNET)
    assert isinstance(exc_info.value.error_for("base58check"), DataEncodingError)


def test_sapling_with_bech32m_checksum_rejected():
    encoded = bech32_encode(MAINNET.sapling_hrp, convertbits(random_shielded_receiver(), 8, 5), Encoding.BECH32M)
    with pytest.raises(AddressDecodeError):
        decode_address(encoded, MAINNET)


def test_wrong_network_unified():
    encoded = encode_address(ZcashAddress.from_unified(random_unified_address()), MAINNET)
    with pytest.raises(AddressDecodeError) as exc_info:
        decode_address(encoded, TESTNET)
    assert isinstance(exc_info.value.error_for("unified"), DataEncodingError)


# --- CONVENIENCE DECODERS --- #

def test_decode_p2pkh(network):
    pubkey_hash = random_hash()
    transparent = encode_address(ZcashAddress.from_p2pkh(pubkey_hash), network)
    unified = encode_unified(UnifiedAddress.from_receivers(p2pkh=pubkey_hash, orchard=random_shielded_receiver()),
                             network.unified_hrp)
    tex = encode_address(ZcashAddress.from_tex(pubkey_hash), network)
    sapling = encode_address(ZcashAddress.from_sapling(random_shielded_receiver()), network)

    assert decode_p2pkh(transparent, network) == pubkey_hash
    assert decode_p2pkh(unified, network) == pubkey_hash
    assert decode_p2pkh(tex, network) is None
    assert decode_p2pkh(tex, network, allow_tex=True) == pubkey_hash
    assert decode_p2pkh(sapling, network) is None


def test_decode_p2sh(network):
    script_hash = random_hash()
    transparent = encode_address(ZcashAddress.from_p2sh(script_hash), network)
    unified = encode_unified(UnifiedAddress.from_receivers(p2sh=script_hash, sapling=random_shielded_receiver()),
                             network.unified_hrp)

    assert decode_p2sh(transparent, network) == script_hash
    assert decode_p2sh(unified, network) == script_hash
    assert decode_p2sh(encode_address(ZcashAddress.from_p2pkh(script_hash), network), network) is None


def test_decode_shielded(network):
    sapling, orchard = random_shielded_receiver(), random_shielded_receiver()
    unified = encode_unified(UnifiedAddress(sapling=sapling, orchard=orchard, unknown={9: b'\x09'}),
                             network.unified_hrp)
    standalone = encode_address(ZcashAddress.from_sapling(sapling), network)

    assert decode_sapling(unified, network) == sapling
    assert decode_sapling(standalone, network) == sapling
    assert decode_orchard(unified, network) == orchard
    assert decode_orchard(standalone, network) is None
    assert decode_sapling(encode_unified(UnifiedAddress(orchard=orchard), network.unified_hrp), network) is None


@pytest.mark.parametrize("decoder", [decode_p2pkh, decode_p2sh, decode_sapling, decode_orchard])
def test_convenience_decoders_propagate_errors(decoder):
    with pytest.raises(AddressDecodeError):
        decoder("t1notvalid", MAINNET)


@pytest.mark.parametrize("hrp_attr, receiver_len, spec", [
    ("tex_hrp", 20, Encoding.BECH32M),
    ("sapling_hrp", 43, Encoding.BECH32),
])
def test_matched_prefix_with_extra_group(network, hrp_attr, receiver_len, spec):
    # One extra 5-bit group leaves a full byte of padding, which cannot convert back
    data = convertbits(token_bytes(receiver_len), 8, 5) + [0]
    encoded = bech32_encode(getattr(network, hrp_attr), data, spec)
    with pytest.raises(LengthError):
        decode_address(encoded, network)
