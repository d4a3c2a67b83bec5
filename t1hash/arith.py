"""Fixed-width integer arithmetic used by the hash functions.

Values are plain Python integers kept in range by masking. 64-bit helpers
wrap modulo 2**64, and 128-bit helpers wrap modulo 2**128.
"""

from __future__ import annotations

__all__ = [
    "MASK32",
    "MASK64",
    "MASK128",
    "PRIME_0",
    "PRIME_1",
    "PRIME_2",
    "PRIME_3",
    "PRIME_4",
    "PRIME_5",
    "PRIME_6",
    "rot64",
    "mul_32x32_64",
    "add64carry_first",
    "add64carry_next",
    "mul_64x64_128",
    "mul_64x64_high",
    "mux64",
    "final64",
    "mixup64",
    "not128",
    "left128",
    "right128",
    "or128",
    "xor128",
    "rot128",
    "add128",
    "mul128",
]

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1

# 'magic' primes
PRIME_0 = 0xEC99BF0D8372CAAB
PRIME_1 = 0x82434FE90EDCEF39
PRIME_2 = 0xD4F06DB99D67BE4B
PRIME_3 = 0xBD9CACC22C6E9571
PRIME_4 = 0x9C06FAF4D023E3AB
PRIME_5 = 0xC060724A8424F345
PRIME_6 = 0xCB5AF53AE3AAAC31


def rot64(v: int, s: int) -> int:
    """Rotate a 64-bit value right by ``s`` bits (``s`` taken modulo 64)."""
    v &= MASK64
    s &= 63
    return ((v >> s) | (v << (64 - s))) & MASK64


def mul_32x32_64(a: int, b: int) -> int:
    """Multiply two 32-bit values into a full 64-bit product."""
    return (a & MASK32) * (b & MASK32)


def add64carry_first(base: int, addend: int) -> tuple[int, int]:
    """Add two 64-bit values; return ``(carry, sum)``."""
    total = (base & MASK64) + (addend & MASK64)
    return total >> 64, total & MASK64


def add64carry_next(carry: int, base: int, addend: int) -> tuple[int, int]:
    """Add two 64-bit values plus an incoming carry; return ``(carry, sum)``."""
    total = (base & MASK64) + (addend & MASK64) + (1 if carry else 0)
    return total >> 64, total & MASK64


def mul_64x64_128(a: int, b: int) -> tuple[int, int]:
    """Multiply two 64-bit values; return the product as ``(low, high)``."""
    product = (a & MASK64) * (b & MASK64)
    return product & MASK64, product >> 64


def mul_64x64_high(a: int, b: int) -> int:
    """Return the high 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & MASK64) * (b & MASK64)) >> 64


def mux64(v: int, prime: int) -> int:
    """XOR the low and high halves of the full 128-bit product."""
    low, high = mul_64x64_128(v, prime)
    return low ^ high


def final64(a: int, b: int) -> int:
    """Fold two 64-bit state words into a final 64-bit hash."""
    x = ((a + rot64(b, 41)) * PRIME_0) & MASK64
    y = ((rot64(a, 23) + b) * PRIME_6) & MASK64
    return mux64(x ^ y, PRIME_5)


def mixup64(a: int, b: int, v: int, prime: int) -> tuple[int, int]:
    """Mix ``v`` into the pair ``(a, b)`` and return the updated pair."""
    low, high = mul_64x64_128((b + v) & MASK64, prime)
    return (a & MASK64) ^ low, ((b & MASK64) + high) & MASK64


def _check_shift(s: int) -> None:
    if not 0 <= s < 128:
        raise ValueError(f"shift must be in range 0..127, got {s}")


def not128(v: int) -> int:
    """Bitwise complement of a 128-bit value."""
    return ~v & MASK128


def left128(v: int, s: int) -> int:
    """Shift a 128-bit value left by ``s`` bits, ``0 <= s < 128``."""
    _check_shift(s)
    return ((v & MASK128) << s) & MASK128


def right128(v: int, s: int) -> int:
    """Shift a 128-bit value right by ``s`` bits, ``0 <= s < 128``."""
    _check_shift(s)
    return (v & MASK128) >> s


def or128(x: int, y: int) -> int:
    """Bitwise OR of two 128-bit values."""
    return (x | y) & MASK128


def xor128(x: int, y: int) -> int:
    """Bitwise XOR of two 128-bit values."""
    return (x ^ y) & MASK128


def rot128(v: int, s: int) -> int:
    """Rotate a 128-bit value right by ``s`` bits (``s`` taken modulo 128)."""
    s &= 127
    v &= MASK128
    if not s:
        return v
    return or128(left128(v, 128 - s), right128(v, s))


def add128(x: int, y: int) -> int:
    """Sum of two 128-bit values modulo 2**128."""
    return ((x & MASK128) + (y & MASK128)) & MASK128


def mul128(x: int, y: int) -> int:
    """Product of two 128-bit values modulo 2**128."""
    return ((x & MASK128) * (y & MASK128)) & MASK128