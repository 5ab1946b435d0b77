"""Array algorithms built on two pointers, hashing and running sums."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import pairwise


def longest_mountain(values: Sequence[int]) -> int:
    """Length of the longest run that strictly rises and then strictly falls.

    A flat step between neighbours ends a mountain. Returns 0 when none exists.
    """
    n = len(values)
    j = 0
    while j < n - 1 and values[j] > values[j + 1]:
        j += 1

    best = 0
    while j < n - 1:
        start = j
        while j < n - 1 and values[j] < values[j + 1]:
            j += 1
        if j == n - 1:
            break
        peak = j
        while j < n - 1 and values[j] > values[j + 1]:
            j += 1
        if start < peak < j:
            best = max(best, j - start + 1)
        if j == peak:
            # Flat step: move past it so the scan always advances.
            j += 1
    return best


def longest_consecutive_run(values: Sequence[int]) -> int:
    """Size of the largest set of values forming consecutive integers."""
    present = set(values)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end in present:
            end += 1
        best = max(best, end - value)
    return best


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """First pair ``(later, earlier)`` whose sum is ``target``, or None."""
    seen: set[int] = set()
    for value in values:
        wanted = target - value
        if wanted in seen:
            return value, wanted
        seen.add(value)
    return None


def trapped_water(heights: Sequence[int]) -> int:
    """Units of water held between the blocks of the given heights."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from buying once and selling once later."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    best = 0
    for price in it:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit from any number of non-overlapping buy/sell trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def unsorted_subarray(values: Sequence[int]) -> tuple[int, int] | None:
    """Inclusive bounds of the shortest slice whose sorting sorts everything.

    Returns None when the values are already sorted.
    """
    misplaced = [v for pair in pairwise(values) if pair[0] > pair[1] for v in pair]
    if not misplaced:
        return None
    smallest, largest = min(misplaced), max(misplaced)
    start = next((i for i, v in enumerate(values) if v > smallest), len(values))
    end = next(
        (i for i, v in reversed(list(enumerate(values))) if v < largest), -1
    )
    return start, end


def triplet_sum(values: Sequence[int], target: int) -> list[tuple[int, int, int]]:
    """All ascending triplets found by the two-pointer scan that sum to ``target``."""
    ordered = sorted(values)
    n = len(ordered)
    found: list[tuple[int, int, int]] = []
    for i in range(n - 2):
        first = ordered[i]
        low, high = i + 1, n - 1
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total == target:
                found.append((first, ordered[low], ordered[high]))
                low += 1
                high -= 1
            elif total < target:
                low += 1
            else:
                high -= 1
    return found


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice (Kadane's algorithm)."""
    best: int | None = None
    current = 0
    for value in values:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def merge_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list.

    On equal values the element from ``b`` comes first.
    """
    return list(heapq.merge(b, a))