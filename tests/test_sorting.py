import random

import pytest

from algolib.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)


def _random_list(seed, size, top=100000):
    rng = random.Random(seed)
    return [rng.randint(0, top) for _ in range(size)]


def _assert_all_sort(items):
    expected = sorted(items)
    assert bubble_sort(list(items)) == expected
    assert heap_sort(list(items)) == expected
    assert insertion_sort(list(items)) == expected
    assert merge_sort(list(items)) == expected
    assert quick_sort(list(items)) == expected
    assert selection_sort(list(items)) == expected
    assert shell_sort(list(items)) == expected


def test_sorts_hundred_numbers():
    items = _random_list(1, 100)
    expected = sorted(items)
    assert bubble_sort(list(items)) == expected
    assert heap_sort(list(items)) == expected
    assert insertion_sort(list(items)) == expected
    assert merge_sort(list(items)) == expected
    assert quick_sort(list(items)) == expected
    assert selection_sort(list(items)) == expected
    assert shell_sort(list(items)) == expected


def test_sorts_in_place():
    original = _random_list(2, 30)
    expected = sorted(original)

    items = list(original)
    assert bubble_sort(items) is items
    assert items == expected

    items = list(original)
    assert heap_sort(items) is items
    assert items == expected

    items = list(original)
    assert insertion_sort(items) is items
    assert items == expected

    items = list(original)
    assert merge_sort(items) is items
    assert items == expected

    items = list(original)
    assert quick_sort(items) is items
    assert items == expected

    items = list(original)
    assert selection_sort(items) is items
    assert items == expected

    items = list(original)
    assert shell_sort(items) is items
    assert items == expected


@pytest.mark.parametrize(
    "items",
    [[], [1], [2, 1], list(range(50)), list(range(50, 0, -1)), [3, 3, 3, 1, 1, 2]],
)
def test_edge_inputs(items):
    expected = sorted(items)
    assert bubble_sort(list(items)) == expected
    assert heap_sort(list(items)) == expected
    assert insertion_sort(list(items)) == expected
    assert merge_sort(list(items)) == expected
    assert quick_sort(list(items)) == expected
    assert selection_sort(list(items)) == expected
    assert shell_sort(list(items)) == expected


def test_many_duplicates():
    items = _random_list(3, 500, top=5)
    expected = sorted(items)
    assert bubble_sort(list(items)) == expected
    assert heap_sort(list(items)) == expected
    assert insertion_sort(list(items)) == expected
    assert merge_sort(list(items)) == expected
    assert quick_sort(list(items)) == expected
    assert selection_sort(list(items)) == expected
    assert shell_sort(list(items)) == expected


def test_larger_list():
    items = _random_list(4, 1000)
    expected = sorted(items)
    assert bubble_sort(list(items)) == expected
    assert heap_sort(list(items)) == expected
    assert insertion_sort(list(items)) == expected
    assert merge_sort(list(items)) == expected
    assert quick_sort(list(items)) == expected
    assert selection_sort(list(items)) == expected
    assert shell_sort(list(items)) == expected


def test_negative_numbers():
    items = [5, -3, 0, -10, 7, -3, 2]
    _assert_all_sort(items)
    assert merge_sort(list(items)) == [-10, -3, -3, 0, 2, 5, 7]