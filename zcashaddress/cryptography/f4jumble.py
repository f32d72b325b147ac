"""
The F4Jumble unkeyed permutation from ZIP 316.

F4Jumble is a 4-round Feistel construction over a message split into a left part of at most 64 bytes and a right
part holding the rest. Applied to the raw Unified Address encoding, it makes every byte of the output depend on
every byte of the input, so that a partial match of two encoded addresses reveals nothing about their receivers.
"""
from math import ceil

from zcashaddress.core import F4JUMBLE, F4JumbleError
from zcashaddress.cryptography.hash_functions import blake2b

__all__ = ["f4jumble", "f4jumble_inv"]


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _h(i: int, u: bytes, left_len: int) -> bytes:
    personal = F4JUMBLE.H_PERSONAL + bytes([i, 0, 0])
    return blake2b(u, digest_size=left_len, personal=personal)


def _g(i: int, u: bytes, right_len: int) -> bytes:
    blocks = ceil(right_len / F4JUMBLE.HASH_LEN)
    out = b''.join(
        blake2b(u, digest_size=F4JUMBLE.HASH_LEN, personal=F4JUMBLE.G_PERSONAL + bytes([i]) + j.to_bytes(2, "little"))
        for j in range(blocks)
    )
    return out[:right_len]


def _split_lengths(message: bytes) -> tuple[int, int]:
    if not F4JUMBLE.MIN_LEN <= len(message) <= F4JUMBLE.MAX_LEN:
        raise F4JumbleError(
            f"F4Jumble input must be between {F4JUMBLE.MIN_LEN} and {F4JUMBLE.MAX_LEN} bytes, got {len(message)}")
    left_len = min(F4JUMBLE.HASH_LEN, len(message) // 2)
    return left_len, len(message) - left_len


def f4jumble(message: bytes) -> bytes:
    left_len, right_len = _split_lengths(message)
    a, b = message[:left_len], message[left_len:]

    x = _xor(b, _g(0, a, right_len))
    y = _xor(a, _h(0, x, left_len))
    d = _xor(x, _g(1, y, right_len))
    c = _xor(y, _h(1, d, left_len))
    return c + d


def f4jumble_inv(message: bytes) -> bytes:
    left_len, right_len = _split_lengths(message)
    c, d = message[:left_len], message[left_len:]

    y = _xor(c, _h(1, d, left_len))
    x = _xor(d, _g(1, y, right_len))
    a = _xor(y, _h(0, x, left_len))
    b = _xor(x, _g(0, a, right_len))
    return a + b
