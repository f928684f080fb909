from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox import sorting

SOURCE_ARRAYS = [
    [1, 3, 2, 9, 10, 8, 4, 5, 6, 7],
    [1, 3, 2, 9, 10, 8, 4, 5, 7, 6],
    [3, 2, 2, 1, 5, 8, 9, 9, 7, 0],
]


@dataclass(order=True)
class Tagged:
    key: int
    tag: int = field(compare=False)


def _assert_all_equal(results, expected):
    for name, result in results.items():
        assert result == expected, name


@pytest.mark.parametrize("data", SOURCE_ARRAYS)
def test_source_examples(data):
    expected = sorted(data)
    results = {
        "bubble": sorting.bubble_sort(data),
        "insertion": sorting.insertion_sort(data),
        "selection": sorting.selection_sort(data),
        "shell_halving": sorting.shell_sort_halving(data),
        "shell_knuth": sorting.shell_sort_knuth(data),
        "merge": sorting.merge_sort(data),
        "heap": sorting.heap_sort(data),
        "quick": sorting.quick_sort(data),
        "quick_iterative": sorting.quick_sort_iterative(data),
        "quick_median": sorting.quick_sort_median_of_three(data),
        "counting": sorting.counting_sort(data),
        "radix": sorting.radix_sort(data),
    }
    _assert_all_equal(results, expected)


@given(data=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=120))
def test_general_sorts_match_sorted(data):
    expected = sorted(data)
    results = {
        "bubble": sorting.bubble_sort(data),
        "insertion": sorting.insertion_sort(data),
        "selection": sorting.selection_sort(data),
        "shell_halving": sorting.shell_sort_halving(data),
        "shell_knuth": sorting.shell_sort_knuth(data),
        "merge": sorting.merge_sort(data),
        "heap": sorting.heap_sort(data),
        "quick": sorting.quick_sort(data),
        "quick_iterative": sorting.quick_sort_iterative(data),
        "quick_median": sorting.quick_sort_median_of_three(data),
    }
    _assert_all_equal(results, expected)


@given(data=st.lists(st.integers(min_value=0, max_value=3), min_size=11, max_size=80))
def test_many_duplicates(data):
    expected = sorted(data)
    results = {
        "bubble": sorting.bubble_sort(data),
        "insertion": sorting.insertion_sort(data),
        "selection": sorting.selection_sort(data),
        "shell_halving": sorting.shell_sort_halving(data),
        "shell_knuth": sorting.shell_sort_knuth(data),
        "merge": sorting.merge_sort(data),
        "heap": sorting.heap_sort(data),
        "quick": sorting.quick_sort(data),
        "quick_iterative": sorting.quick_sort_iterative(data),
        "quick_median": sorting.quick_sort_median_of_three(data),
    }
    _assert_all_equal(results, expected)


def test_large_presorted_and_reversed():
    ascending = list(range(500))
    descending = list(reversed(ascending))
    for data in (ascending, descending):
        results = {
            "bubble": sorting.bubble_sort(data),
            "insertion": sorting.insertion_sort(data),
            "selection": sorting.selection_sort(data),
            "shell_halving": sorting.shell_sort_halving(data),
            "shell_knuth": sorting.shell_sort_knuth(data),
            "merge": sorting.merge_sort(data),
            "heap": sorting.heap_sort(data),
            "quick": sorting.quick_sort(data),
            "quick_iterative": sorting.quick_sort_iterative(data),
            "quick_median": sorting.quick_sort_median_of_three(data),
        }
        _assert_all_equal(results, ascending)


def test_input_left_untouched():
    data = [5, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7]
    snapshot = list(data)
    results = {
        "bubble": sorting.bubble_sort(data),
        "insertion": sorting.insertion_sort(data),
        "selection": sorting.selection_sort(data),
        "shell_halving": sorting.shell_sort_halving(data),
        "shell_knuth": sorting.shell_sort_knuth(data),
        "merge": sorting.merge_sort(data),
        "heap": sorting.heap_sort(data),
        "quick": sorting.quick_sort(data),
        "quick_iterative": sorting.quick_sort_iterative(data),
        "quick_median": sorting.quick_sort_median_of_three(data),
        "counting": sorting.counting_sort(data),
        "radix": sorting.radix_sort(data),
    }
    assert data == snapshot
    _assert_all_equal(results, sorted(snapshot))


@pytest.mark.parametrize("data", [[], [0]])
def test_empty_and_single(data):
    results = {
        "bubble": sorting.bubble_sort(data),
        "insertion": sorting.insertion_sort(data),
        "selection": sorting.selection_sort(data),
        "shell_halving": sorting.shell_sort_halving(data),
        "shell_knuth": sorting.shell_sort_knuth(data),
        "merge": sorting.merge_sort(data),
        "heap": sorting.heap_sort(data),
        "quick": sorting.quick_sort(data),
        "quick_iterative": sorting.quick_sort_iterative(data),
        "quick_median": sorting.quick_sort_median_of_three(data),
        "counting": sorting.counting_sort(data),
        "radix": sorting.radix_sort(data),
        "bucket": sorting.bucket_sort(data),
    }
    _assert_all_equal(results, list(data))


@given(keys=st.lists(st.integers(min_value=0, max_value=4), max_size=60))
def test_stable_sorts_keep_equal_order(keys):
    items = [Tagged(key, position) for position, key in enumerate(keys)]
    expected = sorted((item.key, item.tag) for item in items)
    results = {
        "bubble": sorting.bubble_sort(items),
        "insertion": sorting.insertion_sort(items),
        "merge": sorting.merge_sort(items),
    }
    for name, result in results.items():
        assert [(item.key, item.tag) for item in result] == expected, name


@given(data=st.lists(st.integers(min_value=-500, max_value=500), max_size=100))
def test_heap_sort_descending(data):
    assert sorting.heap_sort_descending(data) == sorted(data, reverse=True)


@given(data=st.lists(st.integers(min_value=0, max_value=100_000), max_size=100))
def test_non_negative_sorts_match_sorted(data):
    expected = sorted(data)
    assert sorting.counting_sort(data) == expected
    assert sorting.radix_sort(data) == expected


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        sorting.counting_sort([3, -1, 2])
    with pytest.raises(ValueError):
        sorting.radix_sort([3, -1, 2])


def test_bucket_sort_source_example():
    data = [0.78, 0.17, 0.39, 0.26, 0.72, 0.94, 0.21, 0.12, 0.23, 0.68]
    assert sorting.bucket_sort(data) == sorted(data)


@given(
    data=st.lists(
        st.floats(min_value=0.0, max_value=1.0, exclude_max=True), max_size=100
    )
)
def test_bucket_sort_matches_sorted(data):
    assert sorting.bucket_sort(data) == sorted(data)


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        sorting.bucket_sort([0.5, bad, 0.2])