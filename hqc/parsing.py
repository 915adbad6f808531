"""Conversion between byte strings and little-endian 64-bit word lists."""

from __future__ import annotations

import struct
from collections.abc import Iterable

_MASK64 = (1 << 64) - 1


def load_words(data: bytes, count: int) -> list[int]:
    """Read ``count`` little-endian 64-bit words from ``data``.

    Missing trailing bytes read as zero; bytes beyond ``count`` words are ignored.
    """
    size = 8 * count
    padded = bytes(data[:size]).ljust(size, b"\0")
    return list(struct.unpack(f"<{count}Q", padded))


def store_words(words: Iterable[int], size: int) -> bytes:
    """Write words as little-endian bytes, truncated or zero-padded to ``size`` bytes."""
    values = [w & _MASK64 for w in words]
    raw = struct.pack(f"<{len(values)}Q", *values)
    return raw[:size].ljust(size, b"\0")