"""Bit-manipulation helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import reduce
from operator import xor

_INT_MASK = 0xFFFFFFFF


def count_different_bits(a: int, b: int) -> int:
    """Number of bits to flip to turn ``a`` into ``b`` as 32-bit integers."""
    x = (a ^ b) & _INT_MASK
    count = 0
    while x:
        x &= x - 1
        count += 1
    return count


def single_among_k(values: Iterable[int], k: int) -> int:
    """The one value seen once where every other non-negative value occurs ``k`` times."""
    if k < 2:
        raise ValueError("k must be at least 2")
    counts: Counter[int] = Counter()
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        pos = 0
        while value:
            if value & 1:
                counts[pos] += 1
            value >>= 1
            pos += 1
    return sum(1 << pos for pos, count in counts.items() if count % k)


def single_among_pairs(values: Iterable[int]) -> int:
    """The one value seen once where every other value occurs twice."""
    return reduce(xor, values, 0)


def two_singles_among_pairs(values: Iterable[int]) -> tuple[int, int]:
    """The two values seen once where every other value occurs twice.

    The first value returned has a clear bit at the lowest position where
    the two differ; the second has it set.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    if combined == 0:
        raise ValueError("no two distinct values occur once")
    pos = 0
    while find_bit(combined, pos) == 0:
        pos += 1
    first = combined
    for value in items:
        if find_bit(value, pos):
            first ^= value
    return first, combined ^ first


def set_bit(n: int, pos: int) -> int:
    """``n`` with the bit at ``pos`` set to 1."""
    return n | (1 << pos)


def clear_bit(n: int, pos: int) -> int:
    """``n`` with the bit at ``pos`` set to 0."""
    return n & ~(1 << pos)


def find_bit(n: int, pos: int) -> int:
    """The bit of ``n`` at ``pos``, 0 or 1."""
    if pos < 0:
        raise ValueError("negative shift count")
    shifted = n >> pos
    return shifted & 1