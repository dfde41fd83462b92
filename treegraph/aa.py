"""AA tree: a search tree balanced by node levels, holding distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    level: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    node.level = child.level + 1
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    return child


def _skew(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.left is None:
        return node
    if node.level == node.left.level:
        node = _rotate_right(node)
    return node


def _split(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.right is None or node.right.right is None:
        return node
    if node.level == node.right.right.level:
        node = _rotate_left(node)
        node.level += 1
    return node


def _insert(node: Optional[_Node], value: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    inserted = False
    if value < node.value:
        node.left, inserted = _insert(node.left, value)
    elif value > node.value:
        node.right, inserted = _insert(node.right, value)
    return _split(_skew(node)), inserted


def _delete(node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
    elif value > node.value:
        node.right, removed = _delete(node.right, value)
    else:
        if node.left is None or node.right is None:
            return (node.left if node.left is not None else node.right), True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right, _ = _delete(node.right, successor.value)
        removed = True
    return _split(_skew(node)), removed


class AATree:
    """A level-balanced search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert a value; return False if it was already present."""
        self.root, inserted = _insert(self.root, value)
        return inserted

    def delete(self, value: Any) -> bool:
        """Remove a value; return whether it was present."""
        self.root, removed = _delete(self.root, value)
        return removed

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
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
            yield node.value
            node = node.right

    def inorder(self) -> list[Any]:
        return list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"