"""Bounded producer/consumer buffer driven by counting semaphores."""

from __future__ import annotations

__all__ = ["BufferFullError", "BufferEmptyError", "BoundedBuffer"]

DEFAULT_CAPACITY = 3


class BufferFullError(OverflowError):
    """Raised when producing into a buffer with no empty slot."""


class BufferEmptyError(IndexError):
    """Raised when consuming from a buffer with no filled slot."""


class BoundedBuffer:
    """Buffer of numbered items; the most recently produced is consumed first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._filled = 0
        self._item = 0

    @property
    def filled(self) -> int:
        """Number of occupied slots."""
        return self._filled

    @property
    def free(self) -> int:
        """Number of empty slots."""
        return self.capacity - self._filled

    def produce(self) -> int:
        """Produce the next item and return its number."""
        if self.free == 0:
            raise BufferFullError("buffer is full")
        self._filled += 1
        self._item += 1
        return self._item

    def consume(self) -> int:
        """Consume the latest item and return its number."""
        if self._filled == 0:
            raise BufferEmptyError("buffer is empty")
        self._filled -= 1
        item = self._item
        self._item -= 1
        return item