"""Height-balanced (AVL) search trees: a set of keys and a player score ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[Any]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[Any]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: Any) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: Any) -> Any:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: Any) -> Any:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance_after_delete(node: Any) -> Any:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], key: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, inserted = _insert(node.left, key)
    elif key > node.key:
        node.right, inserted = _insert(node.right, key)
    else:
        return node, False

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node), inserted
    if balance < -1 and key > node.right.key:
        return _rotate_left(node), inserted
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), inserted
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), inserted
    return node, inserted


def _delete(node: Optional[_Node], key: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right, _ = _delete(node.right, successor.key)
        removed = True
    return _rebalance_after_delete(node), removed


class AVLTree:
    """A self-balancing search tree holding distinct keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Insert a key; return False if it was already present."""
        self.root, inserted = _insert(self.root, key)
        return inserted

    def delete(self, key: Any) -> bool:
        """Remove a key; return whether it was present."""
        self.root, removed = _delete(self.root, key)
        return removed

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def inorder(self) -> list[Any]:
        return list(self)

    def height(self) -> int:
        """Number of levels; zero for an empty tree."""
        return _height(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"


@dataclass(frozen=True)
class Player:
    """A player's identifier and score."""

    player_id: int
    score: int


@dataclass(eq=False)
class _PlayerNode:
    player_id: int
    score: int
    left: Optional["_PlayerNode"] = None
    right: Optional["_PlayerNode"] = None
    height: int = 1


def _insert_player(node: Optional[_PlayerNode], player_id: int, score: int) -> _PlayerNode:
    if node is None:
        return _PlayerNode(player_id, score)
    if score < node.score:
        node.left = _insert_player(node.left, player_id, score)
    else:
        node.right = _insert_player(node.right, player_id, score)

    _update(node)
    balance = _balance(node)
    if balance > 1 and score < node.left.score:
        return _rotate_right(node)
    if balance < -1 and score > node.right.score:
        return _rotate_left(node)
    if balance > 1 and score > node.left.score:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and score < node.right.score:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete_player(
    node: Optional[_PlayerNode], player_id: int
) -> tuple[Optional[_PlayerNode], bool]:
    if node is None:
        return None, False
    if player_id < node.player_id:
        node.left, removed = _delete_player(node.left, player_id)
    elif player_id > node.player_id:
        node.right, removed = _delete_player(node.right, player_id)
    else:
        removed = True
        if node.left is None or node.right is None:
            node = node.left if node.left is not None else node.right
            if node is None:
                return None, True
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.player_id = successor.player_id
            node.score = successor.score
            node.right, _ = _delete_player(node.right, successor.player_id)
    return _rebalance_after_delete(node), removed


class PlayerRanking:
    """Players kept in an AVL tree ordered by score.

    Equal scores go to the right subtree. Removal descends by comparing
    player identifiers, so it finds a player only when identifiers follow
    the same order as scores along the search path.
    """

    def __init__(self) -> None:
        self.root: Optional[_PlayerNode] = None

    def insert(self, player_id: int, score: int) -> None:
        self.root = _insert_player(self.root, player_id, score)

    def delete(self, player_id: int) -> bool:
        """Remove a player; return whether one was removed."""
        self.root, removed = _delete_player(self.root, player_id)
        return removed

    def descending(self) -> Iterator[Player]:
        """Yield players from the highest score to the lowest."""
        stack: list[_PlayerNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield Player(node.player_id, node.score)
            node = node.left

    def __len__(self) -> int:
        return sum(1 for _ in self.descending())

    def height(self) -> int:
        return _height(self.root)