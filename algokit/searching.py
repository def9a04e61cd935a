"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = ["linear_search", "binary_search"]


def linear_search(values: Iterable[Any], key: Any) -> Optional[int]:
    """Return the index of the first element equal to key, or None."""
    for index, item in enumerate(values):
        if item == key:
            return index
    return None


def binary_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of key in an ascending sequence, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] < key:
            left = mid + 1
        elif values[mid] > key:
            right = mid - 1
        else:
            return mid
    return None