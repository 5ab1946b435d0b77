"""Classic comparison sorts. Each returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by swapping adjacent pairs until the largest items settle at the end."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        for i in range(last):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for start in range(1, len(items)):
        current = items[start]
        i = start
        while i > 0 and items[i - 1] > current:
            items[i] = items[i - 1]
            i -= 1
        items[i] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_up(heap: list[int], i: int) -> None:
    item = heap[i]
    while i > 0:
        parent = (i - 1) // 2
        if heap[parent] >= item:
            break
        heap[i] = heap[parent]
        i = parent
    heap[i] = item


def _sift_down(heap: list[int], size: int) -> None:
    i = 0
    while True:
        child = 2 * i + 1
        if child >= size:
            return
        if child + 1 < size and heap[child + 1] > heap[child]:
            child += 1
        if heap[i] >= heap[child]:
            return
        heap[i], heap[child] = heap[child], heap[i]
        i = child


def heap_sort(values: Iterable[int]) -> list[int]:
    """Build a max-heap, then repeatedly move its root behind the shrinking heap."""
    heap = list(values)
    for i in range(1, len(heap)):
        _sift_up(heap, i)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end)
    return heap


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Split in halves, sort each recursively and merge them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int) -> int:
    """Place the first item of the range at its final position and return it."""
    pivot = items[start]
    i, j = start + 1, end
    while True:
        while i <= j and items[i] < pivot:
            i += 1
        while i <= j and items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
        i += 1
        j -= 1
    items[start], items[j] = items[j], items[start]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Partition around the first item of each range, then sort both sides."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items