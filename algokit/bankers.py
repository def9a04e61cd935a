"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

__all__ = ["need_matrix", "safe_sequence"]

Matrix = Sequence[Sequence[int]]


def _check_shape(allocation: Matrix, maximum: Matrix) -> int:
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must list the same processes")
    widths = {len(row) for row in allocation} | {len(row) for row in maximum}
    if len(widths) > 1:
        raise ValueError("every row must cover the same resources")
    return widths.pop() if widths else 0


def need_matrix(allocation: Matrix, maximum: Matrix) -> list[list[int]]:
    """Return what each process may still request: maximum minus allocation."""
    _check_shape(allocation, maximum)
    return [
        [most - held for held, most in zip(held_row, most_row)]
        for held_row, most_row in zip(allocation, maximum)
    ]


def safe_sequence(
    allocation: Matrix, maximum: Matrix, available: Sequence[int]
) -> Optional[list[int]]:
    """Return a safe completion order of process indices, or None if unsafe.

    At each step the lowest-numbered unfinished process whose need fits in
    the available resources runs and releases its allocation.
    """
    resources = _check_shape(allocation, maximum)
    if allocation and resources != len(available):
        raise ValueError("available must list one amount per resource")
    need = need_matrix(allocation, maximum)
    free = list(available)
    finished = [False] * len(allocation)
    order: list[int] = []
    while len(order) < len(allocation):
        runnable = next(
            (
                process
                for process, done in enumerate(finished)
                if not done
                and all(want <= have for want, have in zip(need[process], free))
            ),
            None,
        )
        if runnable is None:
            return None
        free = [have + held for have, held in zip(free, allocation[runnable])]
        finished[runnable] = True
        order.append(runnable)
    return order