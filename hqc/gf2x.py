"""Multiplication of binary polynomials modulo X^n - 1."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .params import Params

_MASK64 = (1 << 64) - 1
_BASE_WORDS = 16


def _clmul(a: int, b: int) -> int:
    """Carryless product of two non-negative integers, walking the sparser operand."""
    if a.bit_count() < b.bit_count():
        a, b = b, a
    result = 0
    while b:
        low = b & -b
        result ^= a << (low.bit_length() - 1)
        b ^= low
    return result


def _words_to_int(words: Sequence[int]) -> int:
    packed = struct.pack(f"<{len(words)}Q", *(w & _MASK64 for w in words))
    return int.from_bytes(packed, "little")


def _int_to_words(value: int, count: int) -> list[int]:
    raw = (value & ((1 << (64 * count)) - 1)).to_bytes(8 * count, "little")
    return list(struct.unpack(f"<{count}Q", raw))


def base_mul(a: int, b: int) -> tuple[int, int]:
    """Return the 128-bit carryless product of two 64-bit words as (low, high)."""
    product = _clmul(a & _MASK64, b & _MASK64)
    return product & _MASK64, product >> 64


def _karatsuba(a: int, b: int, size: int) -> int:
    if size <= _BASE_WORDS:
        return _clmul(a, b)
    size_l = (size + 1) // 2
    size_h = size // 2
    shift = 64 * size_l
    mask = (1 << shift) - 1
    a0, a1 = a & mask, a >> shift
    b0, b1 = b & mask, b >> shift
    low = _karatsuba(a0, b0, size_l)
    high = _karatsuba(a1, b1, size_h)
    middle = _karatsuba(a0 ^ a1, b0 ^ b1, size_l) ^ low ^ high
    return low ^ (middle << shift) ^ (high << (2 * shift))


def karatsuba(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Carryless product of two equal-length word vectors, as ``2 * len(a)`` words."""
    if len(a) != len(b):
        raise ValueError("karatsuba operands must have the same number of words")
    size = len(a)
    if size == 0:
        return []
    product = _karatsuba(_words_to_int(a), _words_to_int(b), size)
    return _int_to_words(product, 2 * size)


def _reduce_int(params: Params, value: int) -> int:
    n_mask = (1 << params.n) - 1
    return (value ^ (value >> params.n)) & n_mask


def poly_reduce(params: Params, a: Sequence[int]) -> list[int]:
    """Reduce a double-length word vector modulo X^n - 1."""
    return _int_to_words(_reduce_int(params, _words_to_int(a)), params.vec_n_size64)


def poly_mul(params: Params, v1: Sequence[int], v2: Sequence[int]) -> list[int]:
    """Multiply two polynomials of ``vec_n_size64`` words modulo X^n - 1."""
    vec_n = params.vec_n_size64
    a = _words_to_int(v1[:vec_n])
    b = _words_to_int(v2[:vec_n])
    product = _karatsuba(a, b, vec_n)
    return _int_to_words(_reduce_int(params, product), vec_n)