"""
Byte Representation Encoders
============================

Primitive encoders used to serialize sample deploys into the raw blob
that accompanies each test vector.

Encoding Rules
--------------
- Integers are little-endian: u8 (1 byte), u32 (4 bytes), u64 (8 bytes)
- Booleans are a single byte (0 or 1)
- U512 is a length byte followed by the minimal little-endian bytes
  (zero is encoded as a single 0x00 length byte)
- Strings and byte lists are prefixed with a u32 length
- Lists are prefixed with a u32 item count
- Options are a 0x00 tag, or a 0x01 tag followed by the value
"""

from typing import Iterable, Optional
import struct

from ledger_vectors.errors import EncodingError

U512_MAX = (1 << 512) - 1
U64_MAX = (1 << 64) - 1
U32_MAX = (1 << 32) - 1


def u8(value: int) -> bytes:
    if not 0 <= value <= 0xFF:
        raise EncodingError(f"u8 out of range: {value}")
    return struct.pack("<B", value)


def u32(value: int) -> bytes:
    if not 0 <= value <= U32_MAX:
        raise EncodingError(f"u32 out of range: {value}")
    return struct.pack("<I", value)


def i32(value: int) -> bytes:
    try:
        return struct.pack("<i", value)
    except struct.error as e:
        raise EncodingError(f"i32 out of range: {value}") from e


def u64(value: int) -> bytes:
    if not 0 <= value <= U64_MAX:
        raise EncodingError(f"u64 out of range: {value}")
    return struct.pack("<Q", value)


def bool_(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def u512(value: int) -> bytes:
    """
    Encode an unsigned 512-bit integer.

    Example:
        >>> u512(0).hex()
        '00'
        >>> u512(256).hex()
        '020001'
    """
    if not 0 <= value <= U512_MAX:
        raise EncodingError(f"U512 out of range: {value}")
    length = (value.bit_length() + 7) // 8
    return u8(length) + value.to_bytes(length, "little")


def byte_list(data: bytes) -> bytes:
    """Length-prefixed byte string."""
    return u32(len(data)) + bytes(data)


def string(value: str) -> bytes:
    return byte_list(value.encode("utf-8"))


def list_of(items: Iterable[bytes]) -> bytes:
    """Count-prefixed list of already-encoded items."""
    items = list(items)
    return u32(len(items)) + b"".join(items)


def option(encoded: Optional[bytes]) -> bytes:
    """Tag an already-encoded value as an option."""
    if encoded is None:
        return b"\x00"
    return b"\x01" + encoded
