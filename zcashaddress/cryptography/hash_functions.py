"""
Shortcuts for the hash functions used by Zcash addresses. Each function returns the bytes digest
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["sha256", "hash256", "ripemd160", "hash160", "blake2b"]


# --- SHA --- #
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #

def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


# --- TRANSPARENT ADDRESS HASHES --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))


# --- BLAKE2 --- #

def blake2b(data: bytes, digest_size: int = 64, personal: bytes = b'') -> bytes:
    """BLAKE2b with an optional personalization string of at most 16 bytes"""
    return hashlib.blake2b(data, digest_size=digest_size, person=personal).digest()
