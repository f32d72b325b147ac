"""
The custom exceptions used throughout zcashaddress
"""
__all__ = ["ZcashAddressError", "StreamError", "TruncatedError", "CompactSizeRangeError", "DataEncodingError",
           "F4JumbleError", "LengthError", "DuplicateItemError", "ItemOrderError", "PaddingError",
           "ReceiverConflictError", "UnsupportedAddressError", "AddressDecodeError"]


class ZcashAddressError(Exception):
    """
    Parent class for every error raised by zcashaddress
    """
    pass


class StreamError(ZcashAddressError):
    """
    Catchall for stream errors
    """
    pass


class TruncatedError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class CompactSizeRangeError(StreamError):
    """
    For CompactSize values outside the permitted range
    """
    pass


class DataEncodingError(ZcashAddressError):
    """
    For use in the Base58Check and Bech32 text codecs
    """
    pass


class F4JumbleError(ZcashAddressError):
    """
    Raised when the F4Jumble input is outside its length bounds
    """
    pass


class LengthError(ZcashAddressError):
    """
    Payload length does not match the fixed length of its receiver type
    """
    pass


class DuplicateItemError(ZcashAddressError):
    """
    A typecode appears more than once in a Unified Address
    """
    pass


class ItemOrderError(ZcashAddressError):
    """
    Unified Address items are not in strictly ascending typecode order
    """
    pass


class PaddingError(ZcashAddressError):
    """
    The trailing 16-byte padding block does not match the human-readable prefix
    """
    pass


class ReceiverConflictError(ZcashAddressError):
    """
    Both a P2PKH and a P2SH receiver were given for one Unified Address
    """
    pass


class UnsupportedAddressError(ZcashAddressError):
    """
    The address uses an encoding which is recognized but not implemented
    """
    pass


class AddressDecodeError(ZcashAddressError):
    """
    Raised by the address dispatcher when every known format failed.

    The underlying failures are kept in order as (format name, error) pairs.
    """

    def __init__(self, attempts: list[tuple[str, ZcashAddressError]]):
        self.attempts = list(attempts)
        details = "; ".join(f"{name}: {err}" for name, err in self.attempts)
        super().__init__(f"Unable to decode address. {details}")

    def error_for(self, name: str) -> ZcashAddressError | None:
        """Return the error recorded for the given format, if it was attempted"""
        for attempt_name, err in self.attempts:
            if attempt_name == name:
                return err
        return None
