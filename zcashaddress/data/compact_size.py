"""
Methods for writing and reading compact size data
"""
from zcashaddress.core import get_stream, read_little_int, read_remaining, SERIALIZED, CompactSizeRangeError, DATA

__all__ = ["read_compact_size", "write_compact_size", "decode_compact_size"]


def _check_range(num: int, allow_out_of_range: bool):
    if num < 0 or num > DATA.MAX_U64:
        raise CompactSizeRangeError(f"{num} cannot be CompactSize encoded")
    if not allow_out_of_range and num > DATA.MAX_COMPACTSIZE:
        raise CompactSizeRangeError(f"{num} exceeds maximum compact size {hex(DATA.MAX_COMPACTSIZE)}")


def read_compact_size(byte_stream: SERIALIZED, allow_out_of_range: bool = False) -> int:
    """
    Returns the integer value of the CompactSize encoding at the head of the stream. The stream is advanced past the
    encoding.

    If `allow_out_of_range` is True, values greater than 0x2000000 are accepted.
    """
    stream = get_stream(byte_stream)

    prefix = read_little_int(stream, 1, "compact-size prefix")

    # One byte compact size number
    if prefix <= 0xfc:
        num = prefix
    else:
        match prefix:
            case 0xfd:
                num = read_little_int(stream, 2, "compact-size 0xfd value")
            case 0xfe:
                num = read_little_int(stream, 4, "compact-size 0xfe value")
            case _:
                num = read_little_int(stream, 8, "compact-size 0xff value")

    _check_range(num, allow_out_of_range)
    return num


def decode_compact_size(data: bytes, allow_out_of_range: bool = False) -> tuple[int, bytes]:
    """
    Decode the CompactSize at the head of `data` and return it along with the unconsumed remainder
    """
    stream = get_stream(data)
    num = read_compact_size(stream, allow_out_of_range)
    return num, read_remaining(stream)


def write_compact_size(num: int, allow_out_of_range: bool = False) -> bytes:
    """
    Given an integer we return its CompactSize encoding

    If `allow_out_of_range` is True, values greater than 0x2000000 may be written.
    """
    _check_range(num, allow_out_of_range)

    if num <= 0xfc:  # One byte
        return num.to_bytes(1, "little")
    elif num <= 0xffff:  # Two bytes
        return b'\xfd' + num.to_bytes(2, "little")
    elif num <= 0xffffffff:  # Four bytes
        return b'\xfe' + num.to_bytes(4, "little")
    else:  # Eight bytes
        return b'\xff' + num.to_bytes(8, "little")
