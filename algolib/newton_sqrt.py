"""Square roots by bisection of the interval that holds them."""

from __future__ import annotations

import math


def newton_sqrt(n: float, precision: float = 1e-7, max_iterations: float = 1e7) -> float:
    """Approximate the square root of ``n``, snapping to an exact integer root when there is one."""
    if n < 0:
        raise ValueError("cannot take the square root of a negative number")
    upper = float(max(n, 1.0))
    lower = 0.0
    square = 0.0
    x = 0.0
    iterations = 0
    while abs(square - n) > precision and iterations < max_iterations:
        iterations += 1
        x = (upper - lower) / 2 + lower
        square = x * x
        if square < n:
            lower = x
        else:
            upper = x

    floor_x = math.floor(x)
    if floor_x * floor_x == n:
        x = float(floor_x)
    elif (floor_x + 1) * (floor_x + 1) == n:
        x = float(floor_x + 1)
    return x