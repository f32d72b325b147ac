"""
The typed, length-prefixed items that make up the body of a Unified Address

Each item is serialized as

    CompactSize(typecode) || CompactSize(len(payload)) || payload

Typecodes and lengths are written with the extended range enabled; neither is bounded by the CompactSize ceiling.
"""
from io import BytesIO

from zcashaddress.core import Serializable, SERIALIZED, Typecode, RECEIVER_LENGTHS, get_stream, read_stream, read_remaining
from zcashaddress.data.compact_size import read_compact_size, write_compact_size

__all__ = ["ReceiverItem", "encode_item", "decode_item", "read_item", "read_item_header"]


def encode_item(typecode: int, payload: bytes) -> bytes:
    return write_compact_size(typecode, True) + write_compact_size(len(payload), True) + payload


def read_item_header(stream: BytesIO) -> tuple[int, int]:
    """
    Read the typecode and declared payload length of the next item. The payload itself is left on the stream.
    """
    typecode = read_compact_size(stream, True)
    length = read_compact_size(stream, True)
    return typecode, length


def read_item(stream: BytesIO) -> tuple[int, bytes]:
    """
    Read the next item from the stream. Returns (typecode, payload).
    """
    typecode, length = read_item_header(stream)
    return typecode, read_stream(stream, length, f"receiver with typecode {typecode}")


def decode_item(data: bytes) -> tuple[int, bytes, bytes]:
    """
    Decode a single item from the head of `data`. Returns (typecode, payload, remainder).
    """
    stream = get_stream(data)
    typecode, payload = read_item(stream)
    return typecode, payload, read_remaining(stream)


class ReceiverItem(Serializable):
    """
    A single receiver inside a Unified Address
    """

    def __init__(self, typecode: int, payload: bytes):
        if typecode < 0:
            raise ValueError("Typecode must be non-negative")
        self.typecode = typecode
        self.payload = bytes(payload)

    @property
    def is_known(self) -> bool:
        return self.typecode in RECEIVER_LENGTHS

    @property
    def name(self) -> str:
        return Typecode(self.typecode).item_name if self.is_known else "unknown"

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        return cls(*read_item(get_stream(byte_stream)))

    def to_bytes(self) -> bytes:
        return encode_item(self.typecode, self.payload)

    def to_dict(self) -> dict:
        return {
            "typecode": self.typecode,
            "name": self.name,
            "payload": self.payload.hex()
        }
