"""Small integer-matrix helpers over lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

__all__ = [
    "MaxRow",
    "format_matrix",
    "max_row_sum",
    "matrix_sum",
    "transpose",
    "multiply",
]

Matrix = Sequence[Sequence[int]]


class MaxRow(NamedTuple):
    """The row with the largest sum: its zero-based index and its total."""

    index: int
    total: int


def _columns(matrix: Matrix) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return widths.pop() if widths else 0


def format_matrix(matrix: Matrix) -> str:
    """Render each row as space-terminated values on its own line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def max_row_sum(matrix: Matrix) -> MaxRow:
    """Return the first row whose sum is largest."""
    if not matrix:
        raise ValueError("matrix has no rows")
    totals = [sum(row) for row in matrix]
    best = max(range(len(totals)), key=totals.__getitem__)
    return MaxRow(best, totals[best])


def matrix_sum(matrix: Matrix) -> int:
    """Return the sum of every element."""
    return sum(sum(row) for row in matrix)


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    _columns(matrix)
    return [list(column) for column in zip(*matrix)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product a × b."""
    inner = _columns(a)
    width = _columns(b)
    if a and inner != len(b):
        raise ValueError(
            f"cannot multiply: left has {inner} columns, right has {len(b)} rows"
        )
    columns = [list(column) for column in zip(*b)] if b else [[] for _ in range(width)]
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]