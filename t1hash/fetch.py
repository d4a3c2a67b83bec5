"""Byte-order helpers: byte swaps and fixed-width integer reads from buffers."""

from __future__ import annotations

from typing import Literal

__all__ = [
    "bswap16",
    "bswap32",
    "bswap64",
    "fetch16_le",
    "fetch32_le",
    "fetch64_le",
    "fetch16_be",
    "fetch32_be",
    "fetch64_be",
    "tail64_le",
    "tail64_be",
]

_Order = Literal["little", "big"]


def _bswap(v: int, width: int) -> int:
    mask = (1 << (width * 8)) - 1
    return int.from_bytes((v & mask).to_bytes(width, "little"), "big")


def bswap16(v: int) -> int:
    """Reverse the byte order of a 16-bit value (wider inputs are truncated)."""
    return _bswap(v, 2)


def bswap32(v: int) -> int:
    """Reverse the byte order of a 32-bit value (wider inputs are truncated)."""
    return _bswap(v, 4)


def bswap64(v: int) -> int:
    """Reverse the byte order of a 64-bit value (wider inputs are truncated)."""
    return _bswap(v, 8)


def _read(data: bytes | bytearray | memoryview, offset: int, width: int, order: _Order) -> int:
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    chunk = bytes(data[offset:offset + width])
    if len(chunk) != width:
        raise ValueError(
            f"need {width} bytes at offset {offset}, buffer has {len(data)} bytes"
        )
    return int.from_bytes(chunk, order)


def fetch16_le(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned little-endian 16-bit integer at ``offset``."""
    return _read(data, offset, 2, "little")


def fetch32_le(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned little-endian 32-bit integer at ``offset``."""
    return _read(data, offset, 4, "little")


def fetch64_le(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned little-endian 64-bit integer at ``offset``."""
    return _read(data, offset, 8, "little")


def fetch16_be(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned big-endian 16-bit integer at ``offset``."""
    return _read(data, offset, 2, "big")


def fetch32_be(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned big-endian 32-bit integer at ``offset``."""
    return _read(data, offset, 4, "big")


def fetch64_be(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned big-endian 64-bit integer at ``offset``."""
    return _read(data, offset, 8, "big")


def _tail_width(tail: int) -> int:
    if tail < 0:
        raise ValueError(f"tail must be non-negative, got {tail}")
    return ((tail - 1) & 7) + 1 if tail else 8


def tail64_le(data: bytes | bytearray | memoryview, offset: int, tail: int) -> int:
    """Read the last partial word of a block as a little-endian integer.

    Only ``tail & 7`` bytes are read, with zero meaning a full eight bytes.
    """
    return _read(data, offset, _tail_width(tail), "little")


def tail64_be(data: bytes | bytearray | memoryview, offset: int, tail: int) -> int:
    """Read the last partial word of a block as a big-endian integer.

    Only ``tail & 7`` bytes are read, with zero meaning a full eight bytes.
    """
    return _read(data, offset, _tail_width(tail), "big")