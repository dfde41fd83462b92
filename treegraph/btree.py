"""B-tree of a given minimum degree, keeping keys in every node."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class _Node:
    leaf: bool = True
    keys: list[Any] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)


class BTree:
    """A B-tree in which each node other than the root holds between
    ``degree - 1`` and ``2 * degree - 1`` keys. Duplicate keys are kept."""

    def __init__(self, degree: int) -> None:
        if degree < 2:
            raise ValueError(f"degree must be at least 2, got {degree}")
        self.degree = degree
        self.root = _Node()

    @property
    def _max_keys(self) -> int:
        return 2 * self.degree - 1

    def _split_child(self, parent: _Node, index: int) -> None:
        t = self.degree
        full = parent.children[index]
        middle = full.keys[t - 1]
        sibling = _Node(
            leaf=full.leaf,
            keys=full.keys[t:],
            children=full.children[t:],
        )
        del full.keys[t - 1 :]
        del full.children[t:]
        parent.keys.insert(index, middle)
        parent.children.insert(index + 1, sibling)

    def insert(self, key: Any) -> None:
        """Insert a key; equal keys are placed after existing ones."""
        if len(self.root.keys) == self._max_keys:
            new_root = _Node(leaf=False, children=[self.root])
            self._split_child(new_root, 0)
            self.root = new_root
        node = self.root
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if len(node.children[index].keys) == self._max_keys:
                self._split_child(node, index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]
        insort_right(node.keys, key)

    @staticmethod
    def _max_key(node: _Node) -> Any:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _min_key(node: _Node) -> Any:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    @staticmethod
    def _merge(node: _Node, index: int) -> None:
        left = node.children[index]
        right = node.children.pop(index + 1)
        left.keys.append(node.keys.pop(index))
        left.keys.extend(right.keys)
        left.children.extend(right.children)

    @staticmethod
    def _borrow_from_prev(node: _Node, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index - 1]
        child.keys.insert(0, node.keys[index - 1])
        node.keys[index - 1] = sibling.keys.pop()
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())

    @staticmethod
    def _borrow_from_next(node: _Node, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys[index])
        node.keys[index] = sibling.keys.pop(0)
        if not child.leaf:
            child.children.append(sibling.children.pop(0))

    def _fill(self, node: _Node, index: int) -> int:
        """Give children[index] at least ``degree`` keys; return its new index."""
        t = self.degree
        if index > 0 and len(node.children[index - 1].keys) >= t:
            self._borrow_from_prev(node, index)
            return index
        if index < len(node.keys) and len(node.children[index + 1].keys) >= t:
            self._borrow_from_next(node, index)
            return index
        if index < len(node.keys):
            self._merge(node, index)
            return index
        self._merge(node, index - 1)
        return index - 1

    def _delete(self, key: Any) -> bool:
        t = self.degree
        node = self.root
        while True:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                if node.leaf:
                    del node.keys[index]
                    return True
                left = node.children[index]
                right = node.children[index + 1]
                if len(left.keys) >= t:
                    key = self._max_key(left)
                    node.keys[index] = key
                    node = left
                elif len(right.keys) >= t:
                    key = self._min_key(right)
                    node.keys[index] = key
                    node = right
                else:
                    self._merge(node, index)
                    node = left
                continue
            if node.leaf:
                return False
            if len(node.children[index].keys) < t:
                index = self._fill(node, index)
            node = node.children[index]

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of key; return whether it was present."""
        removed = self._delete(key)
        if not self.root.keys and not self.root.leaf:
            self.root = self.root.children[0]
        return removed

    def _walk(self, node: _Node) -> Iterator[Any]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self.root)

    def inorder(self) -> list[Any]:
        return list(self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(degree={self.degree}, keys={self.inorder()!r})"