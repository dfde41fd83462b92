"""Red-black tree: a self-balancing search tree with coloured nodes."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class _Node:
    value: Any
    color: Color = Color.RED
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    parent: Optional["_Node"] = None


def _is_black(node: Optional[_Node]) -> bool:
    return node is None or node.color is Color.BLACK


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A red-black tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[_Node] = None
        self.insert_many(values)

    def _rotate_left(self, node: _Node) -> None:
        child = node.right
        node.right = child.left
        if child.left is not None:
            child.left.parent = node
        child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.left = node
        node.parent = child

    def _rotate_right(self, node: _Node) -> None:
        child = node.left
        node.left = child.right
        if child.right is not None:
            child.right.parent = node
        child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node is node.parent.right:
            node.parent.right = child
        else:
            node.parent.left = child
        child.right = node
        node.parent = child

    def _fix_insert(self, node: _Node) -> None:
        while node is not self.root and _is_red(node.parent):
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)
        self.root.color = Color.BLACK

    def insert(self, value: Any) -> None:
        """Insert a value, keeping duplicates."""
        node = _Node(value)
        if self.root is None:
            node.color = Color.BLACK
            self.root = node
            return
        parent = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._fix_insert(node)

    def insert_many(self, values: Iterable[Any]) -> None:
        for value in values:
            self.insert(value)

    def _find(self, value: Any) -> Optional[_Node]:
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def _transplant(self, old: _Node, new: Optional[_Node]) -> None:
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def _fix_delete(self, x: Optional[_Node], parent: Optional[_Node]) -> None:
        while x is not self.root and parent is not None and _is_black(x):
            if x is parent.left:
                sibling = parent.right
                if _is_red(sibling):
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right
                if _is_black(sibling.left) and _is_black(sibling.right):
                    sibling.color = Color.RED
                    x = parent
                    parent = x.parent
                else:
                    if _is_black(sibling.right):
                        if sibling.left is not None:
                            sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.right is not None:
                        sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    x = self.root
                    parent = None
            else:
                sibling = parent.left
                if _is_red(sibling):
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left
                if _is_black(sibling.right) and _is_black(sibling.left):
                    sibling.color = Color.RED
                    x = parent
                    parent = x.parent
                else:
                    if _is_black(sibling.left):
                        if sibling.right is not None:
                            sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.left is not None:
                        sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    x = self.root
                    parent = None
        if x is not None:
            x.color = Color.BLACK

    def remove(self, value: Any) -> None:
        """Remove one occurrence of value; raise KeyError if it is absent."""
        z = self._find(value)
        if z is None:
            raise KeyError(value)
        removed_color = z.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._transplant(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._transplant(z, z.left)
        else:
            y = z.right
            while y.left is not None:
                y = y.left
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
                if x is not None:
                    x.parent = y
            else:
                x_parent = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if removed_color is Color.BLACK:
            self._fix_delete(x, x_parent)

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

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

    def level_order(self) -> list[tuple[Any, Color]]:
        """Values with their colours, breadth first, left to right."""
        result: list[tuple[Any, Color]] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append((node.value, node.color))
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"