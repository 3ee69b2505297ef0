import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.bst import BinarySearchTree

values_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def _build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.height() == -1
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []
    assert 3 not in tree
    assert len(tree) == 0


def test_empty_tree_has_no_extremes():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()


def test_single_node():
    tree = _build([7])
    assert tree.height() == 0
    assert tree.minimum() == tree.maximum() == 7
    assert tree.preorder() == tree.postorder() == tree.inorder() == [7]


def test_small_tree_traversals():
    tree = _build([5, 3, 8, 1, 4])
    assert tree.inorder() == [1, 3, 4, 5, 8]
    assert tree.preorder() == [5, 3, 1, 4, 8]
    assert tree.postorder() == [1, 4, 3, 8, 5]
    assert tree.height() == 2


def test_sorted_insertion_makes_a_chain():
    tree = _build(range(10))
    assert tree.height() == 9
    assert tree.preorder() == list(range(10))
    assert tree.postorder() == list(range(9, -1, -1))


def test_duplicates_are_kept_on_the_left():
    tree = _build([4, 4, 4])
    assert tree.inorder() == [4, 4, 4]
    assert tree.height() == 2
    assert len(tree) == 3


@given(values_lists)
def test_inorder_is_sorted_input(values):
    tree = _build(values)
    assert tree.inorder() == sorted(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


@given(values_lists)
def test_traversals_are_permutations(values):
    tree = _build(values)
    assert sorted(tree.preorder()) == sorted(values)
    assert sorted(tree.postorder()) == sorted(values)


@given(values_lists.filter(bool))
def test_root_positions(values):
    tree = _build(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]


@given(values_lists.filter(bool))
def test_extremes(values):
    tree = _build(values)
    assert tree.minimum() == min(values)
    assert tree.maximum() == max(values)


@given(values_lists, st.integers(min_value=-1000, max_value=1000))
def test_membership(values, probe):
    tree = _build(values)
    assert (probe in tree) == (probe in values)


@given(values_lists)
def test_height_bounds(values):
    tree = _build(values)
    height = tree.height()
    if not values:
        assert height == -1
    else:
        assert 0 <= height <= len(values) - 1
        assert 2 ** (height + 1) - 1 >= len(values)


def test_constructor_accepts_values():
    assert BinarySearchTree([2, 1, 3]).preorder() == _build([2, 1, 3]).preorder()