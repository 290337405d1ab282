"""Randomised selection of the i-th smallest element."""

from __future__ import annotations

import random
from typing import Sequence


def rselect(items: Sequence[int], n: int, i: int) -> int:
    """Return the i-th smallest (0-based) of the first ``n`` items.

    An order below 0 gives the smallest item and one of ``n`` or more the largest.
    The input is left unchanged.
    """
    if n <= 0 or n > len(items):
        raise ValueError("n must lie between 1 and the number of items")
    values = list(items[:n])
    k = min(max(i, 0), n - 1)
    while True:
        pivot = random.choice(values)
        lower = [v for v in values if v < pivot]
        equal_count = sum(1 for v in values if v == pivot)
        if k < len(lower):
            values = lower
        elif k < len(lower) + equal_count:
            return pivot
        else:
            k -= len(lower) + equal_count
            values = [v for v in values if v > pivot]