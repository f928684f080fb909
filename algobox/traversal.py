"""Binary tree traversals, recursive and with explicit stacks and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in pre-order (node, left, right), recursively."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in in-order (left, node, right), recursively."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in post-order (left, right, node), recursively."""
    return list(_postorder(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of levels; a single node has height 1, an empty tree 0."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def given_level(root: Optional[TreeNode], level: int) -> list[Any]:
    """Values on ``level`` (the root is level 1), left to right."""
    if root is None or level < 1:
        return []
    if level == 1:
        return [root.value]
    return given_level(root.left, level - 1) + given_level(root.right, level - 1)


def level_order_by_levels(root: Optional[TreeNode]) -> list[Any]:
    """Breadth-first values, gathered one level at a time (quadratic worst case)."""
    return [
        value
        for level in range(1, height(root) + 1)
        for value in given_level(root, level)
    ]


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Breadth-first values, reading a growing list of nodes front to back."""
    if root is None:
        return []
    visited = [root]
    for node in visited:
        if node.left is not None:
            visited.append(node.left)
        if node.right is not None:
            visited.append(node.right)
    return [node.value for node in visited]


def preorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Pre-order values using an explicit stack."""
    result = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """In-order values using an explicit stack."""
    result = []
    pending: list[TreeNode] = []
    node = root
    while node is not None or pending:
        if node is not None:
            pending.append(node)
            node = node.left
        else:
            top = pending.pop()
            result.append(top.value)
            node = top.right
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Post-order values: a node-right-left walk, reversed."""
    result = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    result.reverse()
    return result


def level_order_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Breadth-first values using a double-ended queue."""
    result = []
    waiting = deque([root] if root is not None else [])
    while waiting:
        node = waiting.popleft()
        result.append(node.value)
        if node.left is not None:
            waiting.append(node.left)
        if node.right is not None:
            waiting.append(node.right)
    return result