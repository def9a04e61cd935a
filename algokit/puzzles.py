"""Backtracking and dynamic-programming puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

__all__ = [
    "is_safe",
    "solve_sudoku",
    "n_queens",
    "format_queens",
    "longest_common_subsequence",
    "minimum_jumps",
]

SIZE = 9
BOX = 3

Grid = Sequence[Sequence[int]]


def is_safe(grid: Grid, row: int, col: int, num: int) -> bool:
    """Return True if num is absent from the cell's row, column and 3x3 box."""
    if any(grid[row][x] == num for x in range(SIZE)):
        return False
    if any(grid[x][col] == num for x in range(SIZE)):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(
        grid[top + i][left + j] != num for i in range(BOX) for j in range(BOX)
    )


def solve_sudoku(grid: Grid) -> Optional[list[list[int]]]:
    """Return a solved copy of a 9x9 grid (0 marks an empty cell), or None."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("sudoku grid must be 9 by 9")
    board = [list(row) for row in grid]
    empty = [(r, c) for r in range(SIZE) for c in range(SIZE) if board[r][c] <= 0]

    def fill(position: int) -> bool:
        if position == len(empty):
            return True
        row, col = empty[position]
        for num in range(1, SIZE + 1):
            if is_safe(board, row, col, num):
                board[row][col] = num
                if fill(position + 1):
                    return True
            board[row][col] = 0
        return False

    return board if fill(0) else None


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Return every placement of n non-attacking queens.

    Each solution gives, for each row, the zero-based column of its queen;
    solutions are in lexicographic order.
    """
    if n < 0:
        raise ValueError("board size cannot be negative")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def fits(col: int) -> bool:
        row = len(columns)
        return all(
            placed != col and abs(placed - col) != row - other
            for other, placed in enumerate(columns)
        )

    def place() -> None:
        if len(columns) == n:
            solutions.append(tuple(columns))
            return
        for col in range(n):
            if fits(col):
                columns.append(col)
                place()
                columns.pop()

    if n:
        place()
    return solutions


def format_queens(solution: Sequence[int]) -> str:
    """Render a solution as tab-separated rows of Q and *."""
    size = len(solution)
    return "".join(
        "".join("Q\t" if col == queen else "*\t" for col in range(size)) + "\n"
        for queen in solution
    )


def longest_common_subsequence(a: str, b: str) -> str:
    """Return a longest common subsequence of two strings."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, start=1):
        for j, y in enumerate(b, start=1):
            if x == y:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    found: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            found.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(found))


def minimum_jumps(values: Sequence[int]) -> Optional[int]:
    """Return the fewest jumps from the first to the last position, or None.

    Each value is the longest jump allowed from its position.
    """
    if not values:
        raise ValueError("at least one position is required")
    jumps = 0
    farthest = 0
    boundary = 0
    last = len(values) - 1
    for position, reach in enumerate(values[:last]):
        farthest = max(farthest, position + reach)
        if position == boundary:
            boundary = farthest
            jumps += 1
    if boundary < last:
        return None
    return jumps