"""Helpers that compute how many machine-word slots a bit set needs."""

from __future__ import annotations

import operator

WORD_BITS = 64
"""Number of bits in one native word slot."""

WORD_BYTES = WORD_BITS // 8
"""Number of bytes in one native word slot."""


def _ceil_div(n: int, d: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"amount must be non-negative, got {n}")
    return -(-n // d)


def from_bits(n: int) -> int:
    """Return the number of slots needed to store ``n`` bits."""
    return _ceil_div(n, WORD_BITS)


def from_bytes(n: int) -> int:
    """Return the number of slots that fit in ``n`` bytes, rounded up."""
    return _ceil_div(n, WORD_BYTES)


def from_kilobytes(n: int) -> int:
    """Return the number of slots that fit in ``n`` kilobytes, rounded up."""
    return _ceil_div(operator.index(n) * 1024, WORD_BYTES)


def from_megabytes(n: int) -> int:
    """Return the number of slots that fit in ``n`` megabytes, rounded up."""
    return _ceil_div(operator.index(n) * 1024 * 1024, WORD_BYTES)