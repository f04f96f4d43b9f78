"""
Hash Input Encoding
===================
Serialization of heterogeneous hash inputs and decoding of digests
into integers.

Integers are written at native 64-bit width, little-endian. Text is
UTF-8. Byte strings pass through unchanged. These rules fix the digest
values, so changing any of them breaks every published test vector.
"""

from typing import Union

from ..exceptions import EncodingError

Part = Union[int, bytes, bytearray, memoryview, str]

INT_WIDTH = 8
_INT_LIMIT = 1 << (8 * INT_WIDTH)


def encode_part(part: Part) -> bytes:
    """
    Serialize one hash input part.

    Args:
        part: Unsigned integer, byte string or text

    Returns:
        Byte encoding of the part

    Raises:
        EncodingError: If the part has an unsupported type or the
            integer doesn't fit in 64 unsigned bits
    """
    # bool is an int subclass; never a meaningful hash input
    if isinstance(part, bool):
        raise EncodingError(f"Cannot encode bool hash input: {part!r}")
    if isinstance(part, int):
        if not 0 <= part < _INT_LIMIT:
            raise EncodingError(f"Integer hash input out of range: {part}")
        return part.to_bytes(INT_WIDTH, "little")
    if isinstance(part, (bytes, bytearray, memoryview)):
        return bytes(part)
    if isinstance(part, str):
        return part.encode("utf-8")
    raise EncodingError(f"Cannot encode hash input of type {type(part).__name__}")


def to_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    """Normalize a password or salt to bytes."""
    return encode_part(value) if isinstance(value, str) else bytes(value)


def bytes_to_int(data: bytes) -> int:
    """
    Decode a digest as a little-endian unsigned integer.

    The bytes are reversed and then read as a big-endian magnitude.
    Only used to pick a block index modulo space_cost.
    """
    return int.from_bytes(bytes(reversed(data)), "big")
