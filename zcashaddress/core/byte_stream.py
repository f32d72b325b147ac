"""
Methods for deserializing byte streams
"""
from io import BytesIO
from typing import Union, Optional

from .exceptions import TruncatedError

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_little_int", "read_remaining"]

SERIALIZED = Union[bytes, bytearray, BytesIO]


def get_stream(byte_stream: SERIALIZED) -> BytesIO:
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(bytes(byte_stream))
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    if len(data) != length:
        if data_type:
            raise TruncatedError(f"Insufficient data for {data_type}: expected {length} bytes, found {len(data)}")
        else:
            raise TruncatedError(f"Insufficient data: expected {length} bytes, found {len(data)}")

    return data


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    data = read_stream(stream, length, data_type)
    return int.from_bytes(data, "little")


def read_remaining(stream: BytesIO) -> bytes:
    """Return the unconsumed tail of the stream"""
    return stream.read()
