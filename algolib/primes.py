"""The sieve of Eratosthenes."""

from __future__ import annotations

import math


def primes_up_to(n: int) -> list[int]:
    """Return the numbers below ``n`` that no smaller number from 2 up divides, 1 included."""
    if n < 0:
        raise ValueError("n must not be negative")
    composite = bytearray(n)
    for i in range(2, math.isqrt(n) + 1):
        if i < n and not composite[i]:
            composite[i * i :: i] = bytes(len(range(i * i, n, i)))
            composite[i * i :: i] = b"\x01" * len(range(i * i, n, i))
    return [i for i in range(1, n) if not composite[i]]