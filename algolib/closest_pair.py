"""Closest pair of points in the plane, by brute force and by divide and conquer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from itertools import combinations, starmap
from typing import Iterable


def _format_float(value: float) -> str:
    """Shortest exact decimal form of ``value``, without exponent or trailing zeros."""
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({_format_float(self.x)},{_format_float(self.y)})"


@dataclass(frozen=True)
class Pair:
    """Two points and the distance between them."""

    point1: Point
    point2: Point
    distance: float

    def __str__(self) -> str:
        return f"{self.point1}-{self.point2}-{_format_float(self.distance)}"


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def make_pair(a: Point, b: Point) -> Pair:
    return Pair(a, b, distance(a, b))


def brute_force(points: Iterable[Point]) -> Pair:
    """Return the closest pair by checking every pair; the first one found wins ties."""
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("need at least two points")
    return min(starmap(make_pair, combinations(pts, 2)), key=lambda pair: pair.distance)


_Tagged = tuple[int, Point]


def _closest(by_x: list[_Tagged], by_y: list[_Tagged]) -> Pair:
    n = len(by_x)
    if n <= 3:
        return brute_force(point for _, point in by_x)
    mid = n // 2
    left_x, right_x = by_x[:mid], by_x[mid:]
    left_ids = {tag for tag, _ in left_x}
    left_y = [item for item in by_y if item[0] in left_ids]
    right_y = [item for item in by_y if item[0] not in left_ids]

    best = min(
        _closest(left_x, left_y),
        _closest(right_x, right_y),
        key=lambda pair: pair.distance,
    )

    x_middle = left_x[-1][1].x
    strip = [point for _, point in by_y if abs(point.x - x_middle) < best.distance]
    for i, lower in enumerate(strip):
        for upper in strip[i + 1 :]:
            if upper.y - lower.y >= best.distance:
                break
            candidate = make_pair(lower, upper)
            if candidate.distance < best.distance:
                best = candidate
    return best


def divide_and_conquer(points: Iterable[Point]) -> Pair:
    """Return the closest pair in O(n log n) by splitting the points at the median x."""
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("need at least two points")
    if len(pts) == 2:
        return make_pair(pts[0], pts[1])
    tagged = list(enumerate(pts))
    by_x = sorted(tagged, key=lambda item: (item[1].x, item[1].y, item[0]))
    by_y = sorted(tagged, key=lambda item: (item[1].y, item[1].x, item[0]))
    return _closest(by_x, by_y)