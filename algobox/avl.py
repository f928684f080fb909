"""A self-balancing AVL tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a new leaf has height 1."""

    value: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


def _balance(node: Optional[AVLNode]) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _leftmost(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _insert(node: Optional[AVLNode], value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
        if _balance(node) > 1:
            assert node.left is not None
            if value < node.left.value:
                return _rotate_right(node)
            if value > node.left.value:
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
    elif value > node.value:
        node.right = _insert(node.right, value)
        if _balance(node) < -1:
            assert node.right is not None
            if value < node.right.value:
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
            if value > node.right.value:
                return _rotate_left(node)
    _update_height(node)
    return node


def _delete(node: Optional[AVLNode], value: Any) -> Optional[AVLNode]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is not None and node.right is not None:
        node.value = _leftmost(node.right).value
        node.right = _delete(node.right, node.value)
    else:
        return node.right if node.left is None else node.left

    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    _update_height(node)
    return node


class AVLTree:
    """AVL tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``, rebalancing on the way back up."""
        self.root = _insert(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present; absent values are ignored."""
        self.root = _delete(self.root, value)

    def min(self) -> Any:
        """Return the smallest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min of an empty tree")
        return _leftmost(self.root).value

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def preorder(self) -> list[Any]:
        """Return the values in pre-order (node, left, right)."""
        result = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(self)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        pending: list[AVLNode] = []
        node = self.root
        while node is not None or pending:
            if node is not None:
                pending.append(node)
                node = node.left
            else:
                top = pending.pop()
                yield top.value
                node = top.right