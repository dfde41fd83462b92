import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from treegraph.redblack import Color, RedBlackTree


def _black_height(node, parent=None):
    """Check structural invariants below node and return its black height."""
    if node is None:
        return 1
    assert node.parent is parent
    if node.color is Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is Color.BLACK
    if node.left is not None:
        assert node.left.value < node.value
    if node.right is not None:
        assert node.right.value >= node.value
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check(tree):
    if tree.root is not None:
        assert tree.root.color is Color.BLACK
    _black_height(tree.root)


def test_empty_tree():
    tree = RedBlackTree()
    assert len(tree) == 0
    assert tree.inorder() == []
    assert tree.level_order() == []
    assert 1 not in tree


def test_three_ascending_inserts_rotate():
    tree = RedBlackTree([1, 2, 3])
    assert tree.level_order() == [
        (2, Color.BLACK),
        (1, Color.RED),
        (3, Color.RED),
    ]


def test_single_node_is_black():
    tree = RedBlackTree()
    tree.insert(5)
    assert tree.level_order() == [(5, Color.BLACK)]


def test_inorder_sorted_and_invariants():
    values = [10, 20, 30, 15, 25, 5, 1, 50, 40, 35]
    tree = RedBlackTree(values)
    assert tree.inorder() == sorted(values)
    assert len(tree) == len(values)
    _check(tree)


def test_insert_many_matches_constructor():
    values = [7, 3, 9, 1, 4]
    tree = RedBlackTree()
    tree.insert_many(values)
    assert tree.level_order() == RedBlackTree(values).level_order()


def test_duplicates_kept():
    tree = RedBlackTree([4, 4, 4, 2])
    assert tree.inorder() == [2, 4, 4, 4]
    tree.remove(4)
    assert tree.inorder() == [2, 4, 4]
    _check(tree)


def test_remove_missing_raises():
    tree = RedBlackTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.remove(99)
    assert tree.inorder() == [1, 2, 3]


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        RedBlackTree().remove(1)


def test_remove_all_values():
    values = list(range(20))
    tree = RedBlackTree(values)
    for value in values:
        tree.remove(value)
        assert value not in tree
        _check(tree)
    assert tree.root is None
    assert len(tree) == 0


def test_contains():
    tree = RedBlackTree([8, 3, 12])
    assert 3 in tree
    assert 12 in tree
    assert 4 not in tree