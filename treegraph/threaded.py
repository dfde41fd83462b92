"""Threaded binary search tree: empty child links point to inorder neighbours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    left_thread: bool = True
    right_thread: bool = True


def _predecessor(node: _Node) -> Optional[_Node]:
    if node.left_thread:
        return node.left
    node = node.left
    while not node.right_thread:
        node = node.right
    return node


def _successor(node: _Node) -> Optional[_Node]:
    if node.right_thread:
        return node.right
    node = node.right
    while not node.left_thread:
        node = node.left
    return node


class ThreadedBinaryTree:
    """A binary search tree of distinct values, traversed inorder without a stack."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def _locate(self, value: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        """Return (node holding value or None, last node visited before it)."""
        parent = None
        node = self.root
        while node is not None:
            if value == node.value:
                return node, parent
            parent = node
            if value < node.value:
                if node.left_thread:
                    break
                node = node.left
            else:
                if node.right_thread:
                    break
                node = node.right
        return None, parent

    def insert(self, value: Any) -> None:
        """Insert a value; raise ValueError if it is already present."""
        found, parent = self._locate(value)
        if found is not None:
            raise ValueError(f"duplicate value not allowed: {value!r}")
        node = _Node(value)
        if parent is None:
            self.root = node
        elif value < parent.value:
            node.left = parent.left
            node.right = parent
            parent.left_thread = False
            parent.left = node
        else:
            node.right = parent.right
            node.left = parent
            parent.right_thread = False
            parent.right = node

    def _unlink(self, node: _Node, parent: Optional[_Node]) -> None:
        """Remove a node that has at most one child."""
        is_left = parent is not None and not parent.left_thread and parent.left is node
        if node.left_thread and node.right_thread:
            if parent is None:
                self.root = None
            elif is_left:
                parent.left_thread = True
                parent.left = node.left
            else:
                parent.right_thread = True
                parent.right = node.right
            return

        child = node.left if not node.left_thread else node.right
        pred = _predecessor(node)
        succ = _successor(node)
        if parent is None:
            self.root = child
        elif is_left:
            parent.left = child
        else:
            parent.right = child
        if not node.left_thread:
            pred.right = succ
        else:
            succ.left = pred

    def delete(self, value: Any) -> None:
        """Remove a value; raise KeyError if it is absent."""
        node, parent = self._locate(value)
        if node is None:
            raise KeyError(value)
        if not node.left_thread and not node.right_thread:
            succ_parent = node
            succ = node.right
            while not succ.left_thread:
                succ_parent = succ
                succ = succ.left
            node.value = succ.value
            node, parent = succ, succ_parent
        self._unlink(node, parent)

    def clear(self) -> None:
        self.root = None

    def __iter__(self) -> Iterator[Any]:
        node = self.root
        if node is None:
            return
        while not node.left_thread:
            node = node.left
        while node is not None:
            yield node.value
            node = _successor(node)

    def inorder(self) -> list[Any]:
        return list(self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: Any) -> bool:
        return self._locate(value)[0] is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"