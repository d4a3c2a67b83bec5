# t1hash

A pure-Python implementation of **t1ha2**, a fast non-cryptographic 64-bit
hash function, computed with little-endian word reads. Both the 64-bit and
the 128-bit variants are available, as one-shot functions and as a streaming
hasher.

t1ha2 is not suitable for cryptography.

## Installation

```
pip install .
```

## One-shot hashing

```python
from t1hash.t1ha2 import t1ha2_atonce, t1ha2_atonce128

h64 = t1ha2_atonce(b"hello world", seed=0)
h128 = t1ha2_atonce128(b"hello world", seed=0)
```

`t1ha2_atonce128` returns one 128-bit integer: the low 64 bits are the
primary result and the high 64 bits the extra half. Seeds are reduced to
64 bits. Data may be `bytes`, `bytearray` or `memoryview`; anything that is
not bytes-like raises `TypeError`.

## Streaming

`T1ha2Hasher` accepts data in pieces of any size; the result does not depend
on how the input was split:

```python
from t1hash.t1ha2 import T1ha2Hasher

hasher = T1ha2Hasher(seed_x=42, seed_y=0)
hasher.update(b"first part, ")
hasher.update(b"second part")

snapshot = hasher.copy()          # independent copy of the state
digest64 = hasher.final64()
digest128 = snapshot.final128()
```

`final64()` and `final128()` do not consume the hasher; more data may be fed
afterwards. The streaming finaliser mixes in the total length, so its
results differ from `t1ha2_atonce` / `t1ha2_atonce128` for the same input.

## Building blocks

`t1hash.fetch` reads unsigned integers from buffers: `fetch16_le`,
`fetch32_le`, `fetch64_le` and their `_be` counterparts take a buffer and an
offset; `tail64_le` / `tail64_be` read the final `tail & 7` bytes of a block
(zero meaning all eight); `bswap16`, `bswap32` and `bswap64` reverse byte
order. Reading past the end of the buffer or at a negative offset raises
`ValueError`.

`t1hash.arith` holds the fixed-width arithmetic the hash is built from, on
plain integers masked to width: `rot64`, `mul_32x32_64`, `add64carry_first`,
`add64carry_next`, `mul_64x64_128` (returns `(low, high)`), `mul_64x64_high`,
`mux64`, `mixup64` (returns the updated pair), `final64`, and the 128-bit
helpers `not128`, `left128`, `right128`, `or128`, `xor128`, `rot128`,
`add128` and `mul128`. `left128` and `right128` raise `ValueError` for shifts
outside `0..127`. The constants `PRIME_0` to `PRIME_6` and the masks
`MASK32`, `MASK64` and `MASK128` are exported as well.

## What it does not do

Only the t1ha2 hash is provided; other members of the t1ha family are not.
There is no command-line tool and no benchmarking harness.

## Running the tests

```
pip install .[test]
pytest
```