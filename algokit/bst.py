"""Binary search tree of unique, ordered values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["DuplicateValueError", "EmptyTreeError", "BinarySearchTree"]


class DuplicateValueError(ValueError):
    """Raised when a value already present in the tree is inserted again."""


class EmptyTreeError(LookupError):
    """Raised when an operation needs at least one node but the tree is empty."""


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Optional[_Node], value: Any) -> Optional[_Node]:
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _delete(node.left, value)
        return node
    if value > node.value:
        node.right = _delete(node.right, value)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    successor = _leftmost(node.right).value
    node.value = successor
    node.right = _delete(node.right, successor)
    return node


class BinarySearchTree:
    """Unbalanced binary search tree that rejects duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree; raise DuplicateValueError if it is present."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            self._size = 1
            return
        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                raise DuplicateValueError(
                    f"duplicate value {value!r} is not permitted"
                )
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove value; a node with two children takes its in-order successor."""
        if self._root is None:
            raise EmptyTreeError("no elements in the tree to delete")
        self._root = _delete(self._root, value)
        self._size -= 1

    def _require_nodes(self) -> _Node:
        if self._root is None:
            raise EmptyTreeError("no elements in the tree")
        return self._root

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(_inorder(self._require_nodes()))

    def preorder(self) -> list[Any]:
        """Return the values root first, then left and right subtrees."""
        return list(_preorder(self._require_nodes()))

    def postorder(self) -> list[Any]:
        """Return the values with both subtrees before their root."""
        return list(_postorder(self._require_nodes()))

    def smallest(self) -> Any:
        """Return the smallest value in the tree."""
        return _leftmost(self._require_nodes()).value

    def largest(self) -> Any:
        """Return the largest value in the tree."""
        return _rightmost(self._require_nodes()).value

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._size = 0

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size