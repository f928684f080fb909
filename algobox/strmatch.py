"""Exact substring search: Knuth-Morris-Pratt and the naive scan."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def prefix_table(pattern: Sequence[Any]) -> list[int]:
    """Return, for each prefix, the length of its longest proper border.

    For ``"ababaca"`` this is ``[0, 0, 1, 2, 3, 0, 1]``.
    """
    table = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = table[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        table[i] = length
    return table


def kmp_search(pattern: Sequence[Any], text: Sequence[Any]) -> list[int]:
    """Return every start index (overlaps included) of ``pattern`` in ``text``."""
    m = len(pattern)
    if m == 0:
        return list(range(len(text) + 1))
    table = prefix_table(pattern)
    matches = []
    matched = 0
    for i, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = table[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == m:
            matches.append(i - m + 1)
            matched = table[matched - 1]
    return matches


def naive_search(pattern: Sequence[Any], text: Sequence[Any]) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` by checking each offset."""
    m = len(pattern)
    return [
        start
        for start in range(len(text) - m + 1)
        if all(pattern[k] == text[start + k] for k in range(m))
    ]