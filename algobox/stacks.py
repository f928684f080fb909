"""Last-in, first-out stacks: a bounded one and an unbounded linked one."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

MIN_CAPACITY = 5


class ArrayStack:
    """Stack with a fixed capacity of at least ``MIN_CAPACITY`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < MIN_CAPACITY:
            raise ValueError("Stack size is too small.")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Push ``item``; raises OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("push onto a full stack")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class _Link:
    item: Any
    below: Optional[_Link]


class LinkedStack:
    """Unbounded stack built from a chain of links."""

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._size = 0

    def push(self, item: Any) -> None:
        self._head = _Link(item, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        link = self._head
        self._head = link.below
        self._size -= 1
        return link.item

    def top(self) -> Any:
        """Return the top item without removing it."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head.item

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top downwards."""
        link = self._head
        while link is not None:
            yield link.item
            link = link.below