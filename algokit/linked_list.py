"""Singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["EmptyListError", "LinkedList"]


class EmptyListError(IndexError):
    """Raised when removing from an empty list."""


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list; positions count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_begin(self, value: Any) -> None:
        """Insert value as the first element."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the given 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"position must be between 1 and {self._size + 1}, got {position}"
            )
        if position == 1:
            self.insert_begin(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Append value as the last element."""
        self.insert_at(self._size + 1, value)

    def delete_begin(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("list is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.data

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at the given 1-based position."""
        if self._head is None:
            raise EmptyListError("list is empty")
        if not 1 <= position <= self._size:
            raise IndexError(
                f"position must be between 1 and {self._size}, got {position}"
            )
        if position == 1:
            return self.delete_begin()
        previous = self._node_at(position - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def delete_end(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise EmptyListError("list is empty")
        return self.delete_at(self._size)

    def format(self) -> str:
        """Render the list as a chain from START to NULL."""
        return "START -->" + "".join(f" {value} -->" for value in self) + " NULL"

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size