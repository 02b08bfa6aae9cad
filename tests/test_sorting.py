import random

import pytest

from contestkit.sorting import (
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


def _random_lists(low, high):
    rng = random.Random(1234)
    for size in (0, 1, 2, 3, 5, 10, 57, 200):
        yield [rng.randint(low, high) for _ in range(size)]


def test_matches_builtin_sorted():
    for data in _random_lists(0, 50):
        expected = sorted(data)
        assert counting_sort(data) == expected
        assert heap_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert selection_sort(data) == expected


def test_already_sorted_and_reversed():
    ascending = list(range(300))
    assert counting_sort(ascending) == ascending
    assert counting_sort(reversed(ascending)) == ascending
    assert heap_sort(ascending) == ascending
    assert heap_sort(reversed(ascending)) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(reversed(ascending)) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(reversed(ascending)) == ascending
    assert quick_sort(ascending) == ascending
    assert quick_sort(reversed(ascending)) == ascending
    assert selection_sort(ascending) == ascending
    assert selection_sort(reversed(ascending)) == ascending


def test_all_equal():
    data = [7] * 40
    assert counting_sort(data) == data
    assert heap_sort(data) == data
    assert insertion_sort(data) == data
    assert merge_sort(data) == data
    assert quick_sort(data) == data
    assert selection_sort(data) == data


def test_input_not_mutated():
    data = [5, 3, 9, 1, 3]
    snapshot = list(data)
    expected = sorted(snapshot)
    assert counting_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert data == snapshot


@pytest.mark.parametrize("sort", [heap_sort, insertion_sort, merge_sort, quick_sort, selection_sort])
def test_comparison_sorts_handle_negatives(sort):
    for data in _random_lists(-100, 100):
        assert sort(data) == sorted(data)


def test_comparison_sorts_negatives_pinned():
    data = [3, -5, 0, -1, 2]
    expected = [-5, -1, 0, 2, 3]
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_insertion_sort_example():
    assert insertion_sort([6, 4, 5, 3, 2, 1]) == [1, 2, 3, 4, 5, 6]


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_quick_sort_large_sorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data