"""Karatsuba multiplication of integers."""

from __future__ import annotations


def karatsuba_multiply(a: int, b: int) -> int:
    """Multiply two integers by splitting them into decimal halves."""
    if a <= 10 or b <= 10:
        return a * b
    m = max(len(str(a)), len(str(b))) // 2
    base = 10**m
    high_a, low_a = divmod(a, base)
    high_b, low_b = divmod(b, base)

    z0 = karatsuba_multiply(high_a, high_b)
    z1 = karatsuba_multiply(low_a, low_b)
    z2 = karatsuba_multiply(high_a + low_a, high_b + low_b) - z0 - z1
    return z0 * base * base + z2 * base + z1