"""Counting inversions in a sequence."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence


def recursive_count(items: Sequence[int]) -> tuple[list[int], int]:
    """Return the items sorted and the number of inversions, by merge sort."""
    n = len(items)
    if n < 2:
        return list(items), 0
    left, left_count = recursive_count(items[: n // 2])
    right, right_count = recursive_count(items[n // 2 :])
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + inversions


def iterative_count(items: Sequence[int]) -> int:
    """Return the number of inversions by checking every pair."""
    return sum(1 for a, b in combinations(items, 2) if b < a)