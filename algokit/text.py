"""String transformations and printable text patterns."""

from __future__ import annotations

import itertools

__all__ = [
    "caesar_shift",
    "concatenate",
    "plus_pattern",
    "number_triangle",
    "even_odd",
]

_ALPHABET = 26


def _rotate(char: str, base: str, key: int) -> str:
    offset = ord(char) - ord(base)
    return chr(ord(base) + (offset + key) % _ALPHABET)


def caesar_shift(text: str, key: int) -> str:
    """Shift ASCII letters by key places, wrapping within each case."""
    shifted = []
    for char in text:
        if "a" <= char <= "z":
            shifted.append(_rotate(char, "a", key))
        elif "A" <= char <= "Z":
            shifted.append(_rotate(char, "A", key))
        else:
            shifted.append(char)
    return "".join(shifted)


def concatenate(first: str, second: str) -> str:
    """Return second appended to first."""
    return "".join((first, second))


def plus_pattern(size: int) -> str:
    """Draw a plus sign of stars, size rows high and size columns wide."""
    if size < 0:
        raise ValueError("size cannot be negative")
    middle = size // 2
    lines = [
        "*" * size if row == middle else " " * middle + "*"
        for row in range(size)
    ]
    return "".join(line + "\n" for line in lines)


def number_triangle(rows: int) -> str:
    """Draw a hollow triangle of consecutive numbers.

    Each row shows its first and last numbers, and the bottom row shows all.
    """
    if rows < 0:
        raise ValueError("rows cannot be negative")
    counter = itertools.count(1)
    lines = []
    for row in range(rows):
        cells = []
        for col in range(row + 1):
            value = next(counter)
            visible = col in (0, row) or row == rows - 1
            cells.append(f"{value} " if visible else "  ")
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def even_odd(limit: int) -> tuple[list[int], list[int]]:
    """Split 0..limit into its even and its odd numbers."""
    numbers = range(limit + 1)
    return [n for n in numbers if n % 2 == 0], [n for n in numbers if n % 2]