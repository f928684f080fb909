"""A red-black tree that keeps duplicates, with parent links."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


class Color(enum.Enum):
    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    value: Any
    color: Color = Color.RED
    left: Optional[RBNode] = field(default=None, repr=False)
    right: Optional[RBNode] = field(default=None, repr=False)
    parent: Optional[RBNode] = field(default=None, repr=False)


def _color(node: Optional[RBNode]) -> Color:
    return Color.BLACK if node is None else node.color


def _leftmost(node: RBNode) -> RBNode:
    while node.left is not None:
        node = node.left
    return node


class RedBlackTree:
    """Red-black tree; equal values are kept and placed to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[RBNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _replace_child(self, old: RBNode, new: Optional[RBNode]) -> None:
        """Hang ``new`` where ``old`` hung under its parent."""
        parent = old.parent
        if new is not None:
            new.parent = parent
        if parent is None:
            self.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def insert(self, value: Any) -> None:
        """Add ``value`` and restore the red-black properties."""
        node = RBNode(value)
        parent: Optional[RBNode] = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if parent is None:
            self.root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_fixup(node)

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            parent = z.parent
            grand = parent.parent
            assert grand is not None
            uncle = grand.right if parent is grand.left else grand.left
            if _color(uncle) is Color.RED:
                assert uncle is not None
                uncle.color = Color.BLACK
                parent.color = Color.BLACK
                grand.color = Color.RED
                z = grand
                continue
            grand.color = Color.RED
            if parent is grand.left:
                if z is parent.right:
                    z.color = Color.BLACK
                    self._rotate_left(parent)
                else:
                    parent.color = Color.BLACK
                self._rotate_right(grand)
            else:
                if z is parent.left:
                    z.color = Color.BLACK
                    self._rotate_right(parent)
                else:
                    parent.color = Color.BLACK
                self._rotate_left(grand)
            break
        assert self.root is not None
        self.root.color = Color.BLACK

    def _find_node(self, value: Any) -> Optional[RBNode]:
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def delete(self, value: Any) -> None:
        """Remove one node holding ``value``; absent values are ignored."""
        z = self._find_node(value)
        if z is None:
            return
        removed_color = z.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._replace_child(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._replace_child(z, z.left)
        else:
            y = _leftmost(z.right)
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._replace_child(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._replace_child(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        self._size -= 1
        if removed_color is Color.BLACK:
            self._delete_fixup(x, x_parent)

    def _delete_fixup(self, x: Optional[RBNode], parent: Optional[RBNode]) -> None:
        while x is not self.root and _color(x) is Color.BLACK:
            assert parent is not None
            if x is parent.left:
                sibling = parent.right
                assert sibling is not None
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right
                    assert sibling is not None
                if _color(sibling.left) is Color.BLACK and _color(sibling.right) is Color.BLACK:
                    sibling.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if _color(sibling.right) is Color.BLACK:
                    assert sibling.left is not None
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right
                    assert sibling is not None
                sibling.color = parent.color
                parent.color = Color.BLACK
                assert sibling.right is not None
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                sibling = parent.left
                assert sibling is not None
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left
                    assert sibling is not None
                if _color(sibling.left) is Color.BLACK and _color(sibling.right) is Color.BLACK:
                    sibling.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if _color(sibling.left) is Color.BLACK:
                    assert sibling.right is not None
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left
                    assert sibling is not None
                sibling.color = parent.color
                parent.color = Color.BLACK
                assert sibling.left is not None
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            x = self.root
            break
        if x is not None:
            x.color = Color.BLACK

    def find(self, value: Any) -> Optional[RBNode]:
        """Return a node holding ``value``, or ``None``."""
        return self._find_node(value)

    def min(self) -> Any:
        """Return the smallest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min of an empty tree")
        return _leftmost(self.root).value

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
        return self._find_node(value) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        pending: list[RBNode] = []
        node = self.root
        while node is not None or pending:
            if node is not None:
                pending.append(node)
                node = node.left
            else:
                top = pending.pop()
                yield top.value
                node = top.right