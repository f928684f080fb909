"""Classic dynamic-programming problems on sequences and items."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of a 0/1 knapsack of the given capacity.

    Each item is taken at most once. Runs in O(len(items) * capacity).
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        # Walk capacities downwards so each item is used at most once.
        # A knapsack of capacity zero always holds nothing.
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def edit_distance(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the Levenshtein distance (insert, delete, replace) between two sequences."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def lcs_length(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def lis_length(items: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in items:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)