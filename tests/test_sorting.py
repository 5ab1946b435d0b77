import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SAMPLES = [
    [10, 2, 1, 3, 4, 5, 60, 50],
    [10, 5, 1, 2, 3, 4, 50, 25, 30, 15],
    [1, 10, 2, 3, 5, 4, 50, 100, 25, 60],
    [12, 10, 5, 1, 2, 3, 4, 20, 15, 18, 12],
    [10, 2, 3, 4, 5, 1, 100, 50, 24],
    [10, 1, 2, 3, 50, 5, 10, 100],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_source_samples(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert heap_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected


def test_source_sample_values():
    assert bubble_sort([10, 2, 1, 3, 4, 5, 60, 50]) == [1, 2, 3, 4, 5, 10, 50, 60]
    assert quick_sort([10, 2, 3, 4, 5, 1, 100, 50, 24]) == [
        1, 2, 3, 4, 5, 10, 24, 50, 100,
    ]
    assert merge_sort([12, 10, 5, 1, 2, 3, 4, 20, 15, 18, 12]) == [
        1, 2, 3, 4, 5, 10, 12, 12, 15, 18, 20,
    ]


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert heap_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert insertion_sort([7]) == [7]
    assert selection_sort([7]) == [7]
    assert heap_sort([7]) == [7]
    assert merge_sort([7]) == [7]
    assert quick_sort([7]) == [7]


def test_duplicates_and_negatives():
    data = [5, 5, 5, -1, 0, -1, 5, 3, 3]
    expected = [-1, -1, 0, 3, 3, 5, 5, 5, 5]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    same = [4, 4, 4, 4]
    assert bubble_sort(same) == same
    assert insertion_sort(same) == same
    assert selection_sort(same) == same
    assert heap_sort(same) == same
    assert merge_sort(same) == same
    assert quick_sort(same) == same


def test_already_sorted_and_reversed():
    ascending = list(range(50))
    descending = list(reversed(ascending))
    for data in (ascending, descending):
        assert bubble_sort(data) == ascending
        assert insertion_sort(data) == ascending
        assert selection_sort(data) == ascending
        assert heap_sort(data) == ascending
        assert merge_sort(data) == ascending
        assert quick_sort(data) == ascending


def test_random_inputs():
    rng = random.Random(1234)
    for size in range(0, 40):
        data = [rng.randint(-20, 20) for _ in range(size)]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected
        assert heap_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected


def test_input_not_mutated():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert heap_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_accepts_any_iterable():
    assert bubble_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert insertion_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert selection_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert heap_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert merge_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert quick_sort(iter((9, 8, 7))) == [7, 8, 9]