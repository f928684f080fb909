"""Comparison and distribution sorting algorithms.

Every function accepts an iterable and returns a new sorted list; the
input itself is never modified.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from itertools import accumulate
from typing import Any

_INSERTION_CUTOFF = 10


def _swap(data: list, i: int, j: int) -> None:
    data[i], data[j] = data[j], data[i]


def _insertion_sort_range(data: list, low: int, high: int) -> None:
    """Sort ``data[low:high + 1]`` in place by straight insertion."""
    for i in range(low + 1, high + 1):
        current = data[i]
        j = i - 1
        while j >= low and data[j] > current:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly bubbling the largest remaining element to the end."""
    data = list(items)
    n = len(data)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if data[j + 1] < data[j]:
                _swap(data, j, j + 1)
    return data


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort by inserting each element after the first one not greater than it."""
    data = list(items)
    _insertion_sort_range(data, 0, len(data) - 1)
    return data


def selection_sort(items: Iterable[Any]) -> list:
    """Sort by selecting the minimum of the unsorted tail on every pass."""
    data = list(items)
    n = len(data)
    for i in range(n - 1):
        min_index = min(range(i, n), key=data.__getitem__)
        if min_index != i:
            _swap(data, i, min_index)
    return data


def shell_sort_halving(items: Iterable[Any]) -> list:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    data = list(items)
    n = len(data)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = data[i]
            j = i
            while j >= gap and current < data[j - gap]:
                data[j] = data[j - gap]
                j -= gap
            data[j] = current
        gap //= 2
    return data


def shell_sort_knuth(items: Iterable[Any]) -> list:
    """Shell sort with Knuth's gap sequence 1, 4, 13, 40, 121, ..."""
    data = list(items)
    n = len(data)
    h = 1
    while h < n // 3:
        h = 3 * h + 1
    while h > 0:
        for i in range(h, n):
            j = i
            while j >= h and data[j] < data[j - h]:
                _swap(data, j, j - h)
                j -= h
        h //= 3
    return data


def _merge(data: list, left: int, mid: int, right: int) -> None:
    merged = []
    i, j = left, mid
    while i < mid and j <= right:
        if data[i] <= data[j]:
            merged.append(data[i])
            i += 1
        else:
            merged.append(data[j])
            j += 1
    merged.extend(data[i:mid])
    merged.extend(data[j:right + 1])
    data[left:right + 1] = merged


def _merge_sort(data: list, left: int, right: int) -> None:
    if left < right:
        center = (left + right) // 2
        _merge_sort(data, left, center)
        _merge_sort(data, center + 1, right)
        _merge(data, left, center + 1, right)


def merge_sort(items: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    data = list(items)
    _merge_sort(data, 0, len(data) - 1)
    return data


def _sift_down(
    data: list, i: int, length: int, before: Callable[[Any, Any], bool]
) -> None:
    """Restore the heap property below ``i``; ``before`` orders parent over child."""
    while 2 * i + 1 < length:
        child = 2 * i + 1
        if child < length - 1 and before(data[child + 1], data[child]):
            child += 1
        if before(data[child], data[i]):
            _swap(data, i, child)
            i = child
        else:
            break


def _heap_sort(items: Iterable[Any], before: Callable[[Any, Any], bool]) -> list:
    data = list(items)
    n = len(data)
    for i in range(n // 2, -1, -1):
        _sift_down(data, i, n, before)
    for end in range(n - 1, 0, -1):
        _swap(data, 0, end)
        _sift_down(data, 0, end, before)
    return data


def heap_sort(items: Iterable[Any]) -> list:
    """Ascending heap sort built on a max-heap."""
    return _heap_sort(items, operator.gt)


def heap_sort_descending(items: Iterable[Any]) -> list:
    """Descending heap sort built on a min-heap."""
    return _heap_sort(items, operator.lt)


def _hoare_partition(data: list, low: int, high: int) -> int:
    """Partition around ``data[low]`` and return the pivot's final index."""
    pivot = data[low]
    i, j = low, high + 1
    while True:
        i += 1
        while data[i] < pivot:
            if i == high:
                break
            i += 1
        j -= 1
        while data[j] > pivot:
            if j == low:
                break
            j -= 1
        if i >= j:
            break
        _swap(data, i, j)
    _swap(data, j, low)
    return j


def _median_of_three(data: list, low: int, high: int) -> Any:
    """Order the ends and centre, park the median at ``high - 1`` and return it."""
    center = (low + high) // 2
    if data[high] < data[low]:
        _swap(data, high, low)
    if data[high] < data[center]:
        _swap(data, high, center)
    if data[low] > data[center]:
        _swap(data, low, center)
    _swap(data, center, high - 1)
    return data[high - 1]


def _median_partition(data: list, low: int, high: int) -> int:
    pivot = _median_of_three(data, low, high)
    i, j = low, high - 1
    while True:
        i += 1
        while data[i] < pivot:
            if i == high:
                break
            i += 1
        j -= 1
        while data[j] > pivot:
            if j == low:
                break
            j -= 1
        if i >= j:
            break
        _swap(data, i, j)
    _swap(data, i, high - 1)
    return i


def _quick_sort(
    data: list, low: int, high: int, partition: Callable[[list, int, int], int]
) -> None:
    # Recurse into the smaller side and loop over the larger to bound the depth.
    while low < high:
        if high - low + 1 <= _INSERTION_CUTOFF:
            _insertion_sort_range(data, low, high)
            return
        p = partition(data, low, high)
        if p - low < high - p:
            _quick_sort(data, low, p - 1, partition)
            low = p + 1
        else:
            _quick_sort(data, p + 1, high, partition)
            high = p - 1


def quick_sort(items: Iterable[Any]) -> list:
    """Quick sort with a first-element pivot and insertion sort for short runs."""
    data = list(items)
    _quick_sort(data, 0, len(data) - 1, _hoare_partition)
    return data


def quick_sort_iterative(items: Iterable[Any]) -> list:
    """Quick sort driven by an explicit stack of pending ranges."""
    data = list(items)
    if len(data) < 2:
        return data
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        pivot = _hoare_partition(data, low, high)
        if pivot - 1 > low:
            pending.append((low, pivot - 1))
        if pivot + 1 < high:
            pending.append((pivot + 1, high))
    return data


def quick_sort_median_of_three(items: Iterable[Any]) -> list:
    """Quick sort choosing the median of the ends and centre as pivot."""
    data = list(items)
    _quick_sort(data, 0, len(data) - 1, _median_partition)
    return data


def _require_non_negative(data: list[int]) -> None:
    if any(value < 0 for value in data):
        raise ValueError("values must be non-negative integers")


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort for non-negative integers."""
    data = list(items)
    if not data:
        return data
    _require_non_negative(data)
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    counts = list(accumulate(counts))
    result = [0] * len(data)
    for value in reversed(data):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def _sort_by_digit(data: list[int], exp: int) -> list[int]:
    counts = [0] * 10
    for value in data:
        counts[(value // exp) % 10] += 1
    counts = list(accumulate(counts))
    result = [0] * len(data)
    for value in reversed(data):
        digit = (value // exp) % 10
        counts[digit] -= 1
        result[counts[digit]] = value
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    data = list(items)
    if not data:
        return data
    _require_non_negative(data)
    maximum = max(data)
    exp = 1
    while maximum // exp > 0:
        data = _sort_by_digit(data, exp)
        exp *= 10
    return data


def bucket_sort(items: Iterable[float]) -> list[float]:
    """Bucket sort for numbers in the half-open range [0, 1)."""
    data = list(items)
    n = len(data)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[min(int(n * value), n - 1)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]