import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.bst import BinarySearchTree

EXAMPLE = [12, 2, 34, 18, 21, 17, 15, 20, 25, 19]

int_lists = st.lists(st.integers(min_value=-100, max_value=100), max_size=40)


def test_example_preorder():
    tree = BinarySearchTree(EXAMPLE)
    assert tree.preorder() == [12, 2, 34, 18, 17, 15, 21, 20, 19, 25]


def test_example_delete_node_with_two_children():
    tree = BinarySearchTree(EXAMPLE)
    tree.delete(18)
    assert tree.preorder() == [12, 2, 34, 19, 17, 15, 21, 20, 25]
    assert 18 not in tree


def test_example_min_and_max():
    tree = BinarySearchTree(EXAMPLE)
    assert tree.min() == min(EXAMPLE)
    assert tree.max() == max(EXAMPLE)


def test_find():
    tree = BinarySearchTree(EXAMPLE)
    assert tree.find(21) == 21
    assert tree.find(22) is None


def test_empty_tree_min_max_raise():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()


def test_clear():
    tree = BinarySearchTree(EXAMPLE)
    tree.clear()
    assert tree.preorder() == []
    assert 12 not in tree


@given(int_lists)
def test_iteration_is_sorted_and_distinct(values):
    assert list(BinarySearchTree(values)) == sorted(set(values))


@given(int_lists)
def test_preorder_rebuilds_same_tree(values):
    tree = BinarySearchTree(values)
    assert BinarySearchTree(tree.preorder()).preorder() == tree.preorder()


@given(int_lists, int_lists)
def test_delete_removes_only_given_values(values, removed):
    tree = BinarySearchTree(values)
    for value in removed:
        tree.delete(value)
    remaining = set(values) - set(removed)
    assert list(tree) == sorted(remaining)
    assert all(value not in tree for value in removed)
    assert all(value in tree for value in remaining)


@given(st.lists(st.integers(min_value=-100, max_value=100), min_size=1, max_size=40))
def test_min_max_match_builtins(values):
    tree = BinarySearchTree(values)
    assert tree.min() == min(values)
    assert tree.max() == max(values)


def test_delete_absent_value_keeps_tree():
    tree = BinarySearchTree(EXAMPLE)
    before = tree.preorder()
    tree.delete(1000)
    assert tree.preorder() == before


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree([5, 3, 5, 3])
    assert list(tree) == [3, 5]