"""Classic comparison sorts. Each sorts its list in place and returns it."""

from __future__ import annotations

from typing import Any, MutableSequence

from algolib.heap import new_min

Items = MutableSequence[Any]


def bubble_sort(items: Items) -> Items:
    end = len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, end + 1):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
                swapped = True
        end -= 1
    return items


def heap_sort(items: Items) -> Items:
    heap = new_min()
    for item in items:
        heap.insert(item)
    items[:] = [heap.extract() for _ in range(len(heap))]
    return items


def insertion_sort(items: Items) -> Items:
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value
    return items


def _merge_sort(items: Items, low: int, high: int) -> None:
    if high - low < 2:
        return
    mid = (low + high) // 2
    _merge_sort(items, low, mid)
    _merge_sort(items, mid, high)
    if items[mid - 1] <= items[mid]:
        return
    left = items[low:mid]
    i, r = low, mid
    for value in left:
        while r < high and items[r] < value:
            items[i] = items[r]
            i += 1
            r += 1
        items[i] = value
        i += 1


def merge_sort(items: Items) -> Items:
    _merge_sort(items, 0, len(items))
    return items


def _partition(items: Items, low: int, high: int, pivot: int) -> int:
    value = items[pivot]
    last = high - 1
    items[pivot], items[last] = items[last], items[pivot]
    store = low
    for i in range(low, last):
        if items[i] <= value:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[store], items[last] = items[last], items[store]
    return store


def _quick_sort(items: Items, low: int, high: int) -> None:
    while high - low > 1:
        pivot = _partition(items, low, high, (low + high) // 2)
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high)
            high = pivot


def quick_sort(items: Items) -> Items:
    _quick_sort(items, 0, len(items))
    return items


def selection_sort(items: Items) -> Items:
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(items: Items) -> Items:
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            value = items[i]
            j = i
            while j >= gap and items[j - gap] > value:
                items[j] = items[j - gap]
                j -= gap
            items[j] = value
        gap = 1 if gap == 2 else gap * 5 // 11
    return items