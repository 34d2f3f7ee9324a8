"""Error types and canonical byte serialization shared by the schemes."""

from __future__ import annotations

import struct
from typing import Any

FIELD_ELEMENT_BYTES = 32


class CryptoError(Exception):
    """Base class for every error raised by the schemes."""


class IncorrectInputLengthError(CryptoError):
    """An input does not have the length a scheme expects."""

    def __init__(self, length: int) -> None:
        super().__init__(f"incorrect input length: {length}")
        self.length = length


class NotPrimeOrderError(CryptoError):
    """A group element is not in the prime-order subgroup."""

    def __init__(self, message: str = "element is not prime order") -> None:
        super().__init__(message)


class SerializationError(CryptoError):
    """A value could not be turned into (or read back from) bytes."""


def to_uncompressed_bytes(value: Any) -> bytes:
    """Serialize a value to its canonical uncompressed byte form.

    Byte strings are taken as they are, integers are encoded as 32-byte
    little-endian field elements, lists and tuples carry an 8-byte
    little-endian length prefix, and any other object must offer a
    ``to_bytes()`` method that returns bytes.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, int):
        if value < 0 or value.bit_length() > FIELD_ELEMENT_BYTES * 8:
            raise SerializationError(
                f"integer {value} does not fit in {FIELD_ELEMENT_BYTES} bytes"
            )
        return value.to_bytes(FIELD_ELEMENT_BYTES, "little")
    if isinstance(value, (list, tuple)):
        body = b"".join(to_uncompressed_bytes(item) for item in value)
        return struct.pack("<Q", len(value)) + body
    to_bytes = getattr(value, "to_bytes", None)
    if callable(to_bytes):
        try:
            data = to_bytes()
        except TypeError as exc:
            raise SerializationError(
                f"cannot serialize {type(value).__name__}"
            ) from exc
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
    raise SerializationError(f"cannot serialize {type(value).__name__}")