"""The t1ha2 hash family: one-shot 64/128-bit hashing and a streaming hasher."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from typing import Union

from t1hash.arith import (
    MASK64,
    PRIME_0,
    PRIME_1,
    PRIME_2,
    PRIME_3,
    PRIME_4,
    PRIME_5,
    PRIME_6,
    final64,
    mixup64,
    rot64,
)
from t1hash.fetch import fetch64_le, tail64_le

__all__ = ["T1ha2Hasher", "t1ha2_atonce", "t1ha2_atonce128"]

BytesLike = Union[bytes, bytearray, memoryview]

_BLOCK = 32
_BLOCK_WORDS = struct.Struct("<4Q")


def _as_bytes(data: BytesLike) -> bytes:
    """Return the raw bytes of a bytes-like object; reject anything else."""
    return memoryview(data).tobytes()


def _final128(a: int, b: int, c: int, d: int) -> int:
    """Fold four state words into a 128-bit result.

    The low 64 bits are the primary hash, the high 64 bits the extra half.
    """
    a, b = mixup64(a, b, rot64(c, 41) ^ d, PRIME_0)
    b, c = mixup64(b, c, rot64(d, 23) ^ a, PRIME_6)
    c, d = mixup64(c, d, rot64(a, 19) ^ b, PRIME_5)
    d, a = mixup64(d, a, rot64(b, 31) ^ c, PRIME_4)
    extra = (c + d) & MASK64
    return (extra << 64) | (a ^ b)


@dataclass
class _State:
    a: int
    b: int
    c: int = 0
    d: int = 0

    def init_cd(self, x: int, y: int) -> None:
        self.c = (rot64(y, 23) + (~x & MASK64)) & MASK64
        self.d = ((~y & MASK64) + rot64(x, 19)) & MASK64

    def absorb_blocks(self, data: bytes | bytearray, end: int) -> None:
        """Mix every full 32-byte block of ``data[:end]`` into the state."""
        a, b, c, d = self.a, self.b, self.c, self.d
        for w0, w1, w2, w3 in _BLOCK_WORDS.iter_unpack(memoryview(data)[:end]):
            d02 = (w0 + rot64((w2 + d) & MASK64, 56)) & MASK64
            c13 = (w1 + rot64((w3 + c) & MASK64, 19)) & MASK64
            d ^= (b + rot64(w1, 38)) & MASK64
            c ^= (a + rot64(w0, 57)) & MASK64
            b ^= (PRIME_6 * (c13 + w2)) & MASK64
            a ^= (PRIME_5 * (d02 + w3)) & MASK64
        self.a, self.b, self.c, self.d = a, b, c, d

    def squash(self) -> None:
        self.a ^= (PRIME_6 * (self.c + rot64(self.d, 23))) & MASK64
        self.b ^= (PRIME_5 * (rot64(self.c, 19) + self.d)) & MASK64

    def tail_ab(self, tail: bytes) -> int:
        """Absorb up to 32 trailing bytes into ``a``/``b`` and return a 64-bit hash."""
        length = len(tail)
        a, b = self.a, self.b
        pos = 0
        if length > 24:
            a, b = mixup64(a, b, fetch64_le(tail, pos), PRIME_4)
            pos += 8
        if length > 16:
            b, a = mixup64(b, a, fetch64_le(tail, pos), PRIME_3)
            pos += 8
        if length > 8:
            a, b = mixup64(a, b, fetch64_le(tail, pos), PRIME_2)
            pos += 8
        if length > 0:
            b, a = mixup64(b, a, tail64_le(tail, pos, length), PRIME_1)
        return final64(a, b)

    def tail_abcd(self, tail: bytes) -> int:
        """Absorb up to 32 trailing bytes into all four words; return 128 bits."""
        length = len(tail)
        a, b, c, d = self.a, self.b, self.c, self.d
        pos = 0
        if length > 24:
            a, d = mixup64(a, d, fetch64_le(tail, pos), PRIME_4)
            pos += 8
        if length > 16:
            b, a = mixup64(b, a, fetch64_le(tail, pos), PRIME_3)
            pos += 8
        if length > 8:
            c, b = mixup64(c, b, fetch64_le(tail, pos), PRIME_2)
            pos += 8
        if length > 0:
            d, c = mixup64(d, c, tail64_le(tail, pos, length), PRIME_1)
        return _final128(a, b, c, d)


def t1ha2_atonce(data: BytesLike, seed: int = 0) -> int:
    """Return the 64-bit t1ha2 hash of ``data`` under ``seed``."""
    buf = _as_bytes(data)
    seed &= MASK64
    length = len(buf)
    state = _State(seed, length)
    tail = buf
    if length > _BLOCK:
        state.init_cd(seed, length)
        whole = length & ~(_BLOCK - 1)
        state.absorb_blocks(buf, whole)
        state.squash()
        tail = buf[whole:]
    return state.tail_ab(tail)


def t1ha2_atonce128(data: BytesLike, seed: int = 0) -> int:
    """Return the 128-bit t1ha2 hash of ``data`` under ``seed``.

    The low 64 bits hold the primary result and the high 64 bits the extra half.
    """
    buf = _as_bytes(data)
    seed &= MASK64
    length = len(buf)
    state = _State(seed, length)
    state.init_cd(seed, length)
    tail = buf
    if length > _BLOCK:
        whole = length & ~(_BLOCK - 1)
        state.absorb_blocks(buf, whole)
        tail = buf[whole:]
    return state.tail_abcd(tail)


class T1ha2Hasher:
    """Incremental t1ha2 hasher.

    Data may be fed in pieces of any size; the result does not depend on how
    the input was split. Finalising does not consume the hasher.
    """

    def __init__(self, seed_x: int = 0, seed_y: int = 0) -> None:
        seed_x &= MASK64
        seed_y &= MASK64
        self._state = _State(seed_x, seed_y)
        self._state.init_cd(seed_x, seed_y)
        self._buffer = bytearray()
        self._total = 0

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hasher."""
        chunk = _as_bytes(data)
        self._total = (self._total + len(chunk)) & MASK64
        self._buffer += chunk
        whole = len(self._buffer) & ~(_BLOCK - 1)
        if whole:
            self._state.absorb_blocks(self._buffer, whole)
            del self._buffer[:whole]

    def copy(self) -> T1ha2Hasher:
        """Return an independent hasher with the same state."""
        clone = T1ha2Hasher.__new__(T1ha2Hasher)
        clone._state = replace(self._state)
        clone._buffer = bytearray(self._buffer)
        clone._total = self._total
        return clone

    def _padded(self) -> T1ha2Hasher:
        clone = self.copy()
        bits = ((self._total << 3) ^ (1 << 63)) & MASK64
        clone.update(bits.to_bytes(8, "little"))
        return clone

    def final64(self) -> int:
        """Return the 64-bit hash of everything fed so far."""
        clone = self._padded()
        clone._state.squash()
        return clone._state.tail_ab(bytes(clone._buffer))

    def final128(self) -> int:
        """Return the 128-bit hash of everything fed so far.

        The low 64 bits hold the primary result and the high 64 bits the extra half.
        """
        clone = self._padded()
        return clone._state.tail_abcd(bytes(clone._buffer))