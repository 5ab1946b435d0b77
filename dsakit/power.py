"""Exponentiation by squaring."""

from __future__ import annotations


def binpow(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative ``exponent`` in O(log exponent) steps."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def binpow_recursive(base: int, exponent: int) -> int:
    """Recursive form of :func:`binpow`."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return _binpow(base, exponent)


def _binpow(base: int, exponent: int) -> int:
    if exponent == 0:
        return 1
    half = _binpow(base, exponent // 2)
    if exponent % 2:
        return half * half * base
    return half * half