import math

import pytest
from hypothesis import given, strategies as st

from treegraph.avl import AVLTree, Player, PlayerRanking


def _check_avl(node):
    """Return the height of node, asserting AVL invariants on the way."""
    if node is None:
        return 0
    left = _check_avl(node.left)
    right = _check_avl(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    return node.height


def test_inorder_is_sorted_and_unique():
    tree = AVLTree([5, 3, 8, 3, 1, 9, 5])
    assert tree.inorder() == [1, 3, 5, 8, 9]
    assert len(tree) == 5


def test_insert_reports_duplicates():
    tree = AVLTree()
    assert tree.insert(4) is True
    assert tree.insert(4) is False
    assert list(tree) == [4]


def test_ascending_insert_stays_balanced():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 3
    assert _check_avl(tree.root) == tree.height()


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert 1 not in tree
    assert tree.delete(1) is False


def test_delete_with_two_children():
    tree = AVLTree([50, 30, 70, 20, 40, 60, 80])
    assert tree.delete(50) is True
    assert tree.inorder() == [20, 30, 40, 60, 70, 80]
    assert 50 not in tree
    _check_avl(tree.root)


def test_delete_missing_leaves_tree_unchanged():
    tree = AVLTree([2, 1, 3])
    assert tree.delete(7) is False
    assert tree.inorder() == [1, 2, 3]


@given(
    st.lists(st.integers(-50, 50)),
    st.lists(st.integers(-50, 50)),
)
def test_matches_set_semantics(inserts, deletes):
    tree = AVLTree(inserts)
    expected = set(inserts)
    for key in deletes:
        assert tree.delete(key) == (key in expected)
        expected.discard(key)
    assert tree.inorder() == sorted(expected)
    assert all(key in tree for key in expected)
    height = _check_avl(tree.root)
    if expected:
        assert height <= 1.45 * math.log2(len(expected) + 2)


def test_ranking_descending_order():
    ranking = PlayerRanking()
    for player_id, score in [(1, 10), (2, 40), (3, 25), (4, 5), (5, 30)]:
        ranking.insert(player_id, score)
    scores = [player.score for player in ranking.descending()]
    assert scores == sorted(scores, reverse=True)
    assert len(ranking) == 5
    assert next(ranking.descending()) == Player(2, 40)


def test_ranking_keeps_equal_scores():
    ranking = PlayerRanking()
    ranking.insert(1, 7)
    ranking.insert(2, 7)
    ranking.insert(3, 7)
    assert sorted(p.player_id for p in ranking.descending()) == [1, 2, 3]
    assert {p.score for p in ranking.descending()} == {7}


def test_ranking_delete_when_ids_follow_scores():
    ranking = PlayerRanking()
    for player_id in range(1, 11):
        ranking.insert(player_id, player_id * 10)
    assert ranking.delete(4) is True
    assert ranking.delete(8) is True
    remaining = [p.player_id for p in ranking.descending()]
    assert remaining == [10, 9, 7, 6, 5, 3, 2, 1]
    assert _check_avl(ranking.root) == ranking.height()


def test_ranking_delete_unknown_player():
    ranking = PlayerRanking()
    ranking.insert(1, 100)
    assert ranking.delete(99) is False
    assert list(ranking.descending()) == [Player(1, 100)]


def test_ranking_delete_last_player():
    ranking = PlayerRanking()
    ranking.insert(1, 100)
    assert ranking.delete(1) is True
    assert len(ranking) == 0
    assert ranking.height() == 0


@pytest.mark.parametrize("count", [1, 16, 100])
def test_ranking_balanced_for_distinct_scores(count):
    ranking = PlayerRanking()
    for player_id in range(count):
        ranking.insert(player_id, player_id)
    assert _check_avl(ranking.root) == ranking.height()
    assert len(ranking) == count