"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


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
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is not None and node.right is not None:
        # Replace with the in-order successor, then remove that successor.
        node.value = _leftmost(node.right).value
        node.right = _delete(node.right, node.value)
    else:
        return node.right if node.left is None else node.left
    return node


class BinarySearchTree:
    """Binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present; absent values are ignored."""
        self._root = _delete(self._root, value)

    def _find_node(self, value: Any) -> Optional[_Node]:
        node = self._root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def find(self, value: Any) -> Optional[Any]:
        """Return the stored value equal to ``value``, or ``None``."""
        node = self._find_node(value)
        return None if node is None else node.value

    def min(self) -> Any:
        """Return the smallest value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("min of an empty tree")
        return _leftmost(self._root).value

    def max(self) -> Any:
        """Return the largest value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("max of an empty tree")
        return _rightmost(self._root).value

    def preorder(self) -> list[Any]:
        """Return the values in pre-order (node, left, right)."""
        result = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def clear(self) -> None:
        """Remove every value."""
        self._root = None

    def __contains__(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        pending: list[_Node] = []
        node = self._root
        while node is not None or pending:
            if node is not None:
                pending.append(node)
                node = node.left
            else:
                top = pending.pop()
                yield top.value
                node = top.right