"""Binary-search based algorithms."""

from __future__ import annotations

import bisect
from collections.abc import Sequence


def can_place_birds(nests: Sequence[int], birds: int, separation: int) -> bool:
    """Whether ``birds`` fit in the sorted ``nests`` at least ``separation`` apart."""
    if not nests:
        return False
    placed = 1
    last = nests[0]
    for nest in nests[1:]:
        if nest - last >= separation:
            placed += 1
            last = nest
        if placed >= birds:
            return True
    return placed >= birds


def angry_birds(nests: Sequence[int], birds: int) -> int:
    """Largest minimum distance achievable between ``birds`` in sorted ``nests``."""
    if not nests:
        raise ValueError("nests must not be empty")
    if birds > len(nests):
        raise ValueError("more birds than nests")
    low, high = 0, nests[-1] - nests[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if can_place_birds(nests, birds, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def binary_search(values: Sequence[int], key: int) -> int:
    """Index of ``key`` in sorted ``values``, or -1 when absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def first_occurrence(values: Sequence[int], key: int) -> int:
    """Index of the first ``key`` in sorted ``values``, or -1."""
    low, high, found = 0, len(values) - 1, -1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            found = mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return found


def last_occurrence(values: Sequence[int], key: int) -> int:
    """Index of the last ``key`` in sorted ``values``, or -1."""
    low, high, found = 0, len(values) - 1, -1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            found = mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return found


def frequency(values: Sequence[int], key: int) -> int:
    """How many times ``key`` occurs in sorted ``values``."""
    first = first_occurrence(values, key)
    last = last_occurrence(values, key)
    if first >= 0 and last >= 0:
        return last - first + 1
    return 0


def min_pair(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Closest pair with one value from each sequence, larger value first."""
    if not a or not b:
        raise ValueError("both sequences must be non-empty")
    ordered = sorted(b)
    best: tuple[int, int] | None = None
    diff: int | None = None
    for x in a:
        pos = bisect.bisect_left(ordered, x)
        if pos >= 1:
            below = ordered[pos - 1]
            if diff is None or x - below < diff:
                diff, best = x - below, (x, below)
        if pos < len(ordered):
            above = ordered[pos]
            if diff is None or above - x < diff:
                diff, best = above - x, (above, x)
    assert best is not None
    return best


def rotated_search(values: Sequence[int], key: int) -> int:
    """Index of ``key`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[low] < values[mid]:
            if values[low] <= key < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if values[mid] < key <= values[high]:
                low = mid + 1
            else:
                high = mid - 1
    return -1


def square_root(n: int, precision: int) -> float:
    """Square root of ``n`` truncated to ``precision`` decimal places."""
    if n < 0:
        raise ValueError("n must not be negative")
    low, high = 0, n
    root = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return float(mid)
        if square < n:
            root = mid
            low = mid + 1
        else:
            high = mid - 1

    result = float(root)
    step = 0.1
    for _ in range(precision):
        while result * result < n:
            result += step
        result -= step
        step /= 10
    return result