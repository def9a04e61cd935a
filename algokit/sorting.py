"""Classic comparison sorts and k-th order statistics.

Every sort takes any iterable and returns a new ascending list, leaving
the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "heap_sort",
    "quick_sort",
    "kth_largest",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(values)
    for unsorted_end in range(len(result) - 1, 0, -1):
        swapped = False
        for i in range(unsorted_end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front."""
    result = list(values)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list[T] = []
    for item in values:
        position = len(result)
        while position > 0 and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _sift_down(heap: list[T], size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    result = list(values)
    size = len(result)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, index)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort using the first element of each range as the pivot."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = result[first]
        i, j = first, last
        while i < j:
            while result[i] <= pivot and i < last:
                i += 1
            while result[j] > pivot:
                j -= 1
            if i < j:
                result[i], result[j] = result[j], result[i]
        result[first], result[j] = result[j], result[first]
        pending.append((first, j - 1))
        pending.append((j + 1, last))
    return result


def kth_largest(values: Iterable[T], k: int) -> T:
    """Return the k-th largest element, counting from 1."""
    ordered = sorted(values, reverse=True)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]