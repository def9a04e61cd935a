"""Triangle measurements."""

from __future__ import annotations

import math

__all__ = ["side_lengths", "heron_area", "base_height_area"]

Point = tuple[float, float]


def side_lengths(p1: Point, p2: Point, p3: Point) -> tuple[float, float, float]:
    """Return the lengths of sides p1-p2, p2-p3 and p3-p1."""
    return math.dist(p1, p2), math.dist(p2, p3), math.dist(p3, p1)


def heron_area(p1: Point, p2: Point, p3: Point) -> float:
    """Return the area of the triangle with these corners, by Heron's formula."""
    a, b, c = side_lengths(p1, p2, p3)
    s = (a + b + c) / 2
    return math.sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))


def base_height_area(base: float, height: float) -> float:
    """Return half of base times height."""
    return 0.5 * base * height