"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """FIFO queue; items leave in the order they were pushed."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, item: Any) -> None:
        """Add ``item`` at the tail."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the head item."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def top(self) -> Any:
        """Return the head item without removing it."""
        if not self._items:
            raise IndexError("top of an empty queue")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"