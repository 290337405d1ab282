"""Three ways to compute Fibonacci numbers."""

from __future__ import annotations

_Matrix2 = tuple[int, int, int, int]


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fib_iter(n: int) -> int:
    """Return the n-th Fibonacci number by iteration."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fib_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion (exponential time)."""
    _check(n)

    def fib(k: int) -> int:
        if k < 2:
            return k
        return fib(k - 1) + fib(k - 2)

    return fib(n)


def _mul(a: _Matrix2, b: _Matrix2) -> _Matrix2:
    return (
        a[0] * b[0] + a[1] * b[2],
        a[0] * b[1] + a[1] * b[3],
        a[2] * b[0] + a[3] * b[2],
        a[2] * b[1] + a[3] * b[3],
    )


def fib_matrix(n: int) -> int:
    """Return the n-th Fibonacci number by raising [[1, 1], [1, 0]] to a power."""
    _check(n)
    if n == 0:
        return 0
    result: _Matrix2 = (1, 0, 0, 1)
    power: _Matrix2 = (1, 1, 1, 0)
    exponent = n - 1
    while exponent:
        if exponent & 1:
            result = _mul(result, power)
        power = _mul(power, power)
        exponent >>= 1
    return result[0]