"""Unbalanced binary search tree with traversals, mirroring and cloning."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _delete(node: Optional[TreeNode], value: Any) -> tuple[Optional[TreeNode], bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if value > node.value:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    node.right, _ = _delete(node.right, successor.value)
    return node, True


def _clone(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    return TreeNode(node.value, _clone(node.left), _clone(node.right))


class BinarySearchTree:
    """A binary search tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self.insert_many(values)

    def insert(self, value: Any) -> None:
        """Insert a value, keeping duplicates."""
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def insert_many(self, values: Iterable[Any]) -> None:
        for value in values:
            self.insert(value)

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of value; return whether anything was removed."""
        self.root, removed = _delete(self.root, value)
        return removed

    def search(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def _nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def inorder(self) -> list[Any]:
        result: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[Any]:
        return [node.value for node in self._nodes()]

    def postorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def levels(self) -> list[list[Any]]:
        """Values grouped by depth, top level first, left to right."""
        result: list[list[Any]] = []
        current = [self.root] if self.root is not None else []
        while current:
            result.append([node.value for node in current])
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return result

    def level_order(self) -> list[Any]:
        result: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of levels; zero for an empty tree."""
        return len(self.levels())

    def leaf_count(self) -> int:
        return sum(1 for node in self._nodes() if node.is_leaf)

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        for node in self._nodes():
            node.left, node.right = node.right, node.left

    def copy(self) -> "BinarySearchTree":
        """Return an independent tree with the same shape and values."""
        duplicate = BinarySearchTree()
        duplicate.root = _clone(self.root)
        return duplicate

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"