"""Binary search in a sorted sequence."""

from __future__ import annotations

from typing import Sequence


def search(sorted_items: Sequence[int], target: int) -> int:
    """Return an index at which ``target`` stands, or -1 when it is absent."""
    low, high = 0, len(sorted_items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = sorted_items[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return -1