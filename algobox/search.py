"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``items``, or -1 if it is absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def binary_search_recursive(items: Sequence[Any], target: Any) -> int:
    """Recursive binary search; same result as :func:`binary_search`."""

    def search(left: int, right: int) -> int:
        if left > right:
            return -1
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            return search(left, mid - 1)
        return search(mid + 1, right)

    return search(0, len(items) - 1)