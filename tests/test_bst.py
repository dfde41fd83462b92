import pytest
from hypothesis import given, strategies as st

from treegraph.bst import BinarySearchTree

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(SAMPLE)


def test_traversals(tree):
    assert tree.inorder() == [20, 30, 40, 50, 60, 70, 80]
    assert tree.preorder() == [50, 30, 20, 40, 70, 60, 80]
    assert tree.postorder() == [20, 40, 30, 60, 80, 70, 50]
    assert tree.level_order() == [50, 30, 70, 20, 40, 60, 80]


def test_levels_and_height(tree):
    assert tree.levels() == [[50], [30, 70], [20, 40, 60, 80]]
    assert tree.height() == len(tree.levels())
    assert tree.leaf_count() == len(tree.levels()[-1])


def test_empty_tree():
    empty = BinarySearchTree()
    assert len(empty) == 0
    assert empty.levels() == []
    assert empty.inorder() == []
    assert empty.height() == 0
    assert 1 not in empty


def test_search(tree):
    assert tree.search(40)
    assert 60 in tree
    assert 45 not in tree


def test_duplicates_are_kept():
    t = BinarySearchTree([5, 5, 5])
    assert t.inorder() == [5, 5, 5]
    assert len(t) == 3
    assert t.delete(5)
    assert t.inorder() == [5, 5]


def test_delete_leaf(tree):
    assert tree.delete(20)
    assert tree.preorder() == [50, 30, 40, 70, 60, 80]


def test_delete_node_with_one_child(tree):
    tree.delete(20)
    tree.delete(30)
    assert tree.preorder() == [50, 40, 70, 60, 80]


def test_delete_node_with_two_children(tree):
    assert tree.delete(50)
    assert tree.preorder() == [60, 30, 20, 40, 70, 80]
    assert 50 not in tree


def test_delete_missing_leaves_tree_unchanged(tree):
    before = tree.preorder()
    assert tree.delete(99) is False
    assert tree.preorder() == before


def test_mirror(tree):
    tree.mirror()
    assert tree.inorder() == sorted(SAMPLE, reverse=True)
    assert tree.levels() == [[50], [70, 30], [80, 60, 40, 20]]
    tree.mirror()
    assert tree.inorder() == sorted(SAMPLE)


def test_copy_is_independent(tree):
    duplicate = tree.copy()
    assert duplicate.preorder() == tree.preorder()
    duplicate.insert(65)
    duplicate.delete(50)
    assert tree.preorder() == [50, 30, 20, 40, 70, 60, 80]
    assert 65 in duplicate
    assert 65 not in tree


def test_iter_is_inorder(tree):
    assert list(tree) == tree.inorder()


@given(st.lists(st.integers()))
def test_inorder_is_sorted(values):
    t = BinarySearchTree(values)
    assert t.inorder() == sorted(values)
    assert len(t) == len(values)
    assert sorted(t.preorder()) == sorted(values)
    assert sorted(t.level_order()) == sorted(values)


@given(st.lists(st.integers(-20, 20)), st.lists(st.integers(-20, 20)))
def test_delete_keeps_remaining_sorted(values, removals):
    t = BinarySearchTree(values)
    remaining = list(values)
    for value in removals:
        removed = t.delete(value)
        assert removed == (value in remaining)
        if removed:
            remaining.remove(value)
    assert t.inorder() == sorted(remaining)


@given(st.lists(st.integers()))
def test_height_bounds(values):
    t = BinarySearchTree(values)
    assert t.height() <= len(values)
    assert sum(len(level) for level in t.levels()) == len(values)