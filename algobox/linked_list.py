"""Singly linked lists of nodes and the classic operations on them.

Functions that change a list's shape take its head and return the new head;
an empty list is ``None``.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Optional[Node] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the chain."""
        for node in _nodes(self):
            yield node.value


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _length(head: Optional[Node]) -> int:
    return sum(1 for _ in _nodes(head))


def random_values(
    size: int = 5, modulus: int = 100, rng: Optional[random.Random] = None
) -> list[int]:
    """Return ``size`` random integers in ``range(modulus)``."""
    if size < 0:
        raise ValueError("size must be non-negative")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(modulus) for _ in range(size)]


def build_head_insert(values: Iterable[Any]) -> Optional[Node]:
    """Build a list by inserting every value at the head (reverses the order)."""
    head: Optional[Node] = None
    for value in values:
        head = Node(value, head)
    return head


def build_tail_insert(values: Iterable[Any]) -> Optional[Node]:
    """Build a list by appending every value at the tail (keeps the order)."""
    anchor = Node(None)
    tail = anchor
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return anchor.next


def build_sorted(values: Iterable[Any]) -> Optional[Node]:
    """Build an ascending list by sorted insertion of every value."""
    head: Optional[Node] = None
    for value in values:
        head = insert_sorted(head, value)
    return head


def to_list(head: Optional[Node]) -> list[Any]:
    """Return the values of the list as a Python list."""
    return [node.value for node in _nodes(head)]


def insert_sorted(head: Optional[Node], value: Any) -> Node:
    """Insert ``value`` into an ascending list, keeping it ascending."""
    previous: Optional[Node] = None
    current = head
    while current is not None and value > current.value:
        previous, current = current, current.next
    node = Node(value, current)
    if previous is None:
        return node
    previous.next = node
    assert head is not None
    return head


def delete_value(head: Optional[Node], value: Any) -> Optional[Node]:
    """Remove every node holding ``value``."""
    anchor = Node(None, head)
    previous = anchor
    while previous.next is not None:
        if previous.next.value == value:
            previous.next = previous.next.next
        else:
            previous = previous.next
    return anchor.next


def delete_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Keep only the first node of every value."""
    for node in _nodes(head):
        node.next = delete_value(node.next, node.value)
    return head


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return its new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous, current = current, following
    return previous


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; of two middles, the first one."""
    if head is None:
        return None
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def merge_sorted(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two ascending lists into one; on ties ``first`` goes before ``second``."""
    anchor = Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection_node(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the first node shared by two acyclic lists, or ``None``."""
    first_length, second_length = _length(first), _length(second)
    while first_length > second_length:
        first = first.next  # type: ignore[union-attr]
        first_length -= 1
    while second_length > first_length:
        second = second.next  # type: ignore[union-attr]
        second_length -= 1
    while first is not second:
        first = first.next  # type: ignore[union-attr]
        second = second.next  # type: ignore[union-attr]
    return first