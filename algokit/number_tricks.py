"""Small integer puzzles: digit tricks, factorials, ordinals and duplicates."""

from __future__ import annotations

import itertools
import math
from collections import Counter
from collections.abc import Hashable, Sequence

__all__ = [
    "is_armstrong",
    "years_to_overtake",
    "factorial",
    "factorial_recursive",
    "gcd",
    "reversed_digits",
    "is_palindrome",
    "product",
    "tribonacci",
    "square_root",
    "exponent_expression",
    "ordinal_suffix",
    "ordinal_table",
    "duplicate_positions",
    "duplicate_indices",
]


def is_armstrong(n: int) -> bool:
    """Return True if n equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return n == sum(int(digit) ** 3 for digit in str(n))


def years_to_overtake(a: int, b: int) -> int:
    """Count the rounds until a, tripling each round, exceeds b, doubling."""
    if a <= b and a <= 0:
        raise ValueError("a must be positive for it to ever exceed b")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def factorial(n: int) -> int:
    """Return n! computed iteratively."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a < 1 or b < 1:
        raise ValueError("both numbers must be positive")
    return math.gcd(a, b)


def reversed_digits(n: int) -> int:
    """Return n with its decimal digits in reverse order, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome(n: int) -> bool:
    """Return True if n reads the same with its digits reversed."""
    return n == reversed_digits(n)


def product(a: int, b: int) -> int:
    """Multiply two non-negative integers by repeated addition."""
    larger, smaller = max(a, b), min(a, b)
    if smaller < 0:
        raise ValueError("both numbers must be non-negative")
    return sum(itertools.repeat(larger, smaller))


def tribonacci(first: int, second: int, count: int) -> list[int]:
    """Return count terms starting first, second, first + second.

    Every later term is the sum of the three before it.
    """
    if count < 0:
        raise ValueError("count cannot be negative")
    terms = [first, second, first + second][:count]
    while len(terms) < count:
        terms.append(sum(terms[-3:]))
    return terms


def square_root(x: float) -> float:
    """Return the square root of a non-negative number."""
    if x < 0:
        raise ValueError("cannot take the square root of a negative number")
    return math.sqrt(x)


def exponent_expression() -> float:
    """Evaluate (2.9678e-27 + 0.876e-38) / (7.025e16 - 9.75e12)."""
    numerator = 2.9678 * 10.0 ** -27 + 0.876 * 10.0 ** -38
    denominator = 7.025 * 10.0 ** 16 - 9.75 * 10.0 ** 12
    return numerator / denominator


def ordinal_suffix(n: int) -> str:
    """Return the English ordinal suffix: st, nd, rd or th.

    Only 11, 12 and 13 themselves are treated as exceptions.
    """
    if n in (11, 12, 13) or n < 0:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal_table() -> str:
    """Render 1st to 100th in twenty rows of five tab-separated columns."""
    rows = []
    for start in range(1, 21):
        cells = (
            f"{value:3d}{ordinal_suffix(value)}"
            for value in range(start, start + 81, 20)
        )
        rows.append("\t".join(cells) + "\n")
    return "".join(rows)


def _counts(values: Sequence[Hashable]) -> Counter:
    return Counter(values)


def duplicate_positions(
    values: Sequence[Hashable],
) -> list[tuple[Hashable, list[int]]]:
    """For each position holding a repeated value, give the value and all its indices.

    A value that appears k times is reported k times, once per occurrence.
    """
    counts = _counts(values)
    places: dict[Hashable, list[int]] = {}
    for index, value in enumerate(values):
        places.setdefault(value, []).append(index)
    return [
        (value, list(places[value])) for value in values if counts[value] > 1
    ]


def duplicate_indices(values: Sequence[Hashable]) -> list[int]:
    """Return the indices whose value occurs more than once."""
    counts = _counts(values)
    return [index for index, value in enumerate(values) if counts[value] > 1]