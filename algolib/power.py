"""Integer powers in unsigned 32-bit arithmetic."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def _check(power: int) -> None:
    if power < 0:
        raise ValueError("power must be a positive integer or zero")


def fast_power(n: int, power: int) -> int:
    """Return ``n ** power`` modulo 2**32 by repeated squaring."""
    _check(power)
    result = 1
    factor = n & _MASK
    while power:
        if power & 1:
            result = (result * factor) & _MASK
        factor = (factor * factor) & _MASK
        power >>= 1
    return result


def slow_power(n: int, power: int) -> int:
    """Return ``n ** power`` modulo 2**32 by repeated multiplication."""
    _check(power)
    n &= _MASK
    result = 1
    for _ in range(power):
        result = (result * n) & _MASK
    return result