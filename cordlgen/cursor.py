"""Readers for the variable-length integer encoding used in il2cpp metadata."""

from __future__ import annotations

import struct
from typing import BinaryIO

U32_MAX = 0xFFFFFFFF
I32_MIN = -(2**31)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError(f"expected {count} byte(s), got {len(data)}")
    return data


def _read_u8(stream: BinaryIO) -> int:
    return _read_exact(stream, 1)[0]


def read_compressed_u32(stream: BinaryIO) -> int:
    """Read a compressed unsigned 32-bit integer from a binary stream."""
    first = _read_u8(stream)

    if first & 0x80 == 0:
        return first
    if first & 0xC0 == 0x80:
        return ((first & ~0x80) << 8) | _read_u8(stream)
    if first & 0xE0 == 0xC0:
        rest = _read_exact(stream, 3)
        return ((first & ~0xC0) << 24) | (rest[0] << 16) | (rest[1] << 8) | rest[2]
    if first == 0xF0:
        (value,) = struct.unpack("<I", _read_exact(stream, 4))
        return value
    if first == 0xFE:
        return U32_MAX - 1
    if first == 0xFF:
        return U32_MAX
    raise ValueError(f"Invalid compressed integer format: 0x{first:02x}")


def read_compressed_i32(stream: BinaryIO) -> int:
    """Read a compressed signed 32-bit integer from a binary stream."""
    encoded = read_compressed_u32(stream)

    # the all-ones pattern stands for the minimum int32
    if encoded == U32_MAX:
        return I32_MIN

    is_negative = encoded & 1
    encoded >>= 1
    return -(encoded + 1) if is_negative else encoded