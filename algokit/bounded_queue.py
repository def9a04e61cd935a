"""Array-style FIFO queue with a fixed number of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["QueueFullError", "QueueEmptyError", "BoundedQueue"]

DEFAULT_CAPACITY = 5


class QueueFullError(OverflowError):
    """Raised when enqueuing into a queue with no free slot."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """FIFO queue over a fixed array of slots.

    Slots freed by dequeuing are not reused until the queue has drained
    completely, so the queue may report full while holding fewer items
    than its capacity.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add value at the rear; raise QueueFullError when no slot is free."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == len(self._slots):
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def is_full(self) -> bool:
        """Return True when the rear has reached the last slot."""
        return len(self._slots) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front