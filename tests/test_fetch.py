import pytest
from hypothesis import given
from hypothesis import strategies as st

from t1hash.fetch import (
    bswap16,
    bswap32,
    bswap64,
    fetch16_be,
    fetch16_le,
    fetch32_be,
    fetch32_le,
    fetch64_be,
    fetch64_le,
    tail64_be,
    tail64_le,
)

SEQ = bytes(range(1, 17))


def test_bswap64_pinned():
    assert bswap64(0x0102030405060708) == 0x0807060504030201


def test_bswap32_and_16_pinned():
    assert bswap32(0x01020304) == 0x04030201
    assert bswap16(0x0102) == 0x0201


def test_bswap_truncates_to_width():
    assert bswap16(0x1_0102) == bswap16(0x0102)
    assert bswap32(0xFF_01020304) == bswap32(0x01020304)


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_bswap64_involution(v):
    assert bswap64(bswap64(v)) == v


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_bswap32_involution(v):
    assert bswap32(bswap32(v)) == v


@given(st.integers(min_value=0, max_value=2**16 - 1))
def test_bswap16_involution(v):
    assert bswap16(bswap16(v)) == v


@given(st.integers(min_value=0, max_value=2**64 - 1), st.integers(0, 8))
def test_fetch64_round_trip(v, offset):
    buf = b"\xaa" * offset + v.to_bytes(8, "little")
    assert fetch64_le(buf, offset) == v
    buf_be = b"\xaa" * offset + v.to_bytes(8, "big")
    assert fetch64_be(buf_be, offset) == v


@given(st.binary(min_size=8, max_size=24), st.data())
def test_le_be_relation(data, draw):
    offset = draw.draw(st.integers(0, len(data) - 8))
    assert fetch64_le(data, offset) == bswap64(fetch64_be(data, offset))
    assert fetch32_le(data, offset) == bswap32(fetch32_be(data, offset))
    assert fetch16_le(data, offset) == bswap16(fetch16_be(data, offset))


def test_narrow_reads_are_prefixes():
    assert fetch32_le(SEQ, 3) == fetch64_le(SEQ, 3) & 0xFFFFFFFF
    assert fetch16_le(SEQ, 5) == fetch32_le(SEQ, 5) & 0xFFFF
    assert fetch32_be(SEQ, 2) == fetch64_be(SEQ, 2) >> 32
    assert fetch16_be(SEQ, 1) == fetch32_be(SEQ, 1) >> 16


def test_accepts_bytearray_and_memoryview():
    expected = fetch64_le(SEQ, 4)
    assert fetch64_le(bytearray(SEQ), 4) == expected
    assert fetch64_le(memoryview(SEQ), 4) == expected


def test_short_buffer_raises():
    with pytest.raises(ValueError):
        fetch64_le(b"\x00" * 7, 0)
    with pytest.raises(ValueError):
        fetch32_be(b"\x00" * 8, 5)


def test_negative_offset_raises():
    with pytest.raises(ValueError):
        fetch16_le(SEQ, -1)


def test_tail_zero_is_full_word():
    assert tail64_le(SEQ, 3, 0) == fetch64_le(SEQ, 3)
    assert tail64_be(SEQ, 3, 0) == fetch64_be(SEQ, 3)
    assert tail64_le(SEQ, 0, 8) == fetch64_le(SEQ, 0)


@pytest.mark.parametrize("tail", range(1, 8))
def test_tail_le_masks_high_bytes(tail):
    full = fetch64_le(SEQ, 2)
    assert tail64_le(SEQ, 2, tail) == full & ((1 << (8 * tail)) - 1)


@pytest.mark.parametrize("tail", range(1, 8))
def test_tail_be_shifts_out_low_bytes(tail):
    full = fetch64_be(SEQ, 2)
    assert tail64_be(SEQ, 2, tail) == full >> (8 * (8 - tail))


def test_tail_uses_low_three_bits():
    assert tail64_le(SEQ, 0, 17) == tail64_le(SEQ, 0, 1)
    assert tail64_le(SEQ, 0, 24) == tail64_le(SEQ, 0, 8)
    assert tail64_be(SEQ, 0, 31) == tail64_be(SEQ, 0, 7)


@given(st.integers(1, 8).flatmap(
    lambda n: st.tuples(st.just(n), st.integers(0, 2 ** (8 * n) - 1))))
def test_tail_round_trip(pair):
    n, v = pair
    assert tail64_le(v.to_bytes(n, "little"), 0, n) == v
    assert tail64_be(v.to_bytes(n, "big"), 0, n) == v


def test_tail_reads_only_needed_bytes():
    assert tail64_le(b"\x01\x02\x03", 0, 3) == fetch16_le(b"\x01\x02", 0) | (3 << 16)


def test_tail_short_buffer_raises():
    with pytest.raises(ValueError):
        tail64_le(b"ab", 0, 3)
    with pytest.raises(ValueError):
        tail64_be(b"abc", 1, 0)


def test_tail_negative_raises():
    with pytest.raises(ValueError):
        tail64_le(SEQ, 0, -1)