"""Greatest common divisors: Stein's binary method and Bezout coefficients."""

from __future__ import annotations


def _check_non_negative(a: int, b: int) -> None:
    if a < 0 or b < 0:
        raise ValueError("binary gcd needs non-negative integers")


def binary_gcd_recursive(a: int, b: int) -> int:
    """Return gcd(a, b) by Stein's algorithm, recursively."""
    _check_non_negative(a, b)

    def gcd(x: int, y: int) -> int:
        if x == y:
            return x
        if x == 0 or y == 0:
            return x + y
        if x % 2 == 0:
            if y % 2 == 1:
                return gcd(x >> 1, y)
            return gcd(x >> 1, y >> 1) << 1
        if y % 2 == 0:
            return gcd(x, y >> 1)
        if x > y:
            return gcd((x - y) >> 1, y)
        return gcd((y - x) >> 1, x)

    return gcd(a, b)


def binary_gcd_iterative(a: int, b: int) -> int:
    """Return gcd(a, b) by Stein's algorithm, iteratively."""
    _check_non_negative(a, b)
    if a == b:
        return a
    if a == 0 or b == 0:
        return a + b
    shift = 0
    while (a | b) & 1 == 0:
        a >>= 1
        b >>= 1
        shift += 1
    while a & 1 == 0:
        a >>= 1
    while b:
        while b & 1 == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a
    return a << shift


def divide(a: int, b: int) -> int:
    """Return what is left of ``a`` once ``b`` has been taken away as often as it fits."""
    if b <= 0:
        raise ValueError("divisor must be positive")
    return a if a < b else a % b


def bezout_coefficients(a: int, b: int) -> tuple[int, int]:
    """Return (x, y) with ``x * a + y * b == gcd(|a|, |b|)``."""
    r0, r1 = abs(a), abs(b)
    x0, x1 = 1, 0
    y0, y1 = 0, 1
    while r1:
        quotient = r0 // r1
        r0, r1 = r1, divide(r0, r1)
        x0, x1 = x1, x0 - quotient * x1
        y0, y1 = y1, y0 - quotient * y1
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0