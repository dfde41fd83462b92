import pytest
from hypothesis import given, settings, strategies as st

from treegraph.threaded import ThreadedBinaryTree


def _structural_inorder(node):
    if node is None:
        return []
    left = [] if node.left_thread else _structural_inorder(node.left)
    right = [] if node.right_thread else _structural_inorder(node.right)
    return left + [node] + right


def _check_threads(tree):
    nodes = _structural_inorder(tree.root)
    for index, node in enumerate(nodes):
        if node.left_thread:
            expected = nodes[index - 1] if index > 0 else None
            assert node.left is expected
        if node.right_thread:
            expected = nodes[index + 1] if index + 1 < len(nodes) else None
            assert node.right is expected
    assert [node.value for node in nodes] == tree.inorder()


def test_empty_tree():
    tree = ThreadedBinaryTree()
    assert tree.inorder() == []
    assert len(tree) == 0
    assert 3 not in tree


def test_inorder_is_sorted():
    values = [20, 10, 30, 5, 16, 14, 17, 13]
    tree = ThreadedBinaryTree(values)
    assert tree.inorder() == sorted(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)
    _check_threads(tree)


def test_duplicate_insert_raises():
    tree = ThreadedBinaryTree([4, 2])
    with pytest.raises(ValueError):
        tree.insert(4)
    assert tree.inorder() == [2, 4]


def test_delete_missing_raises():
    tree = ThreadedBinaryTree([4, 2, 6])
    with pytest.raises(KeyError):
        tree.delete(5)
    assert tree.inorder() == [2, 4, 6]


@pytest.mark.parametrize("victim", [20, 10, 30, 5, 16, 14, 17, 13])
def test_delete_each_node(victim):
    values = [20, 10, 30, 5, 16, 14, 17, 13]
    tree = ThreadedBinaryTree(values)
    tree.delete(victim)
    assert tree.inorder() == sorted(v for v in values if v != victim)
    assert victim not in tree
    _check_threads(tree)


def test_delete_root_with_single_child_fixes_threads():
    tree = ThreadedBinaryTree([5, 3])
    tree.delete(5)
    assert tree.inorder() == [3]
    assert 5 not in tree
    _check_threads(tree)


def test_clear_empties_tree():
    tree = ThreadedBinaryTree([3, 1, 2])
    tree.clear()
    assert tree.inorder() == []
    tree.insert(7)
    assert tree.inorder() == [7]


def test_membership():
    tree = ThreadedBinaryTree([8, 3, 10, 1, 6])
    assert all(value in tree for value in (8, 3, 10, 1, 6))
    assert 7 not in tree


@settings(max_examples=80, deadline=None)
@given(st.lists(st.tuples(st.booleans(), st.integers(0, 25)), max_size=60))
def test_behaves_like_a_set(ops):
    tree = ThreadedBinaryTree()
    model = set()
    for is_insert, value in ops:
        if is_insert:
            if value in model:
                with pytest.raises(ValueError):
                    tree.insert(value)
            else:
                tree.insert(value)
                model.add(value)
        else:
            if value in model:
                tree.delete(value)
                model.discard(value)
            else:
                with pytest.raises(KeyError):
                    tree.delete(value)
        _check_threads(tree)
    assert tree.inorder() == sorted(model)
    assert len(tree) == len(model)