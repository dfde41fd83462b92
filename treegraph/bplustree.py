"""B+ tree: keys live in linked leaves, internal nodes hold separators."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union


@dataclass(eq=False)
class _Leaf:
    keys: list[Any] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)
    next: Optional["_Leaf"] = None


@dataclass(eq=False)
class _Internal:
    keys: list[Any]
    children: list[Union["_Internal", _Leaf]]


_Node = Union[_Internal, _Leaf]


class BPlusTree:
    """A B+ tree of the given minimum degree.

    Every node other than the root holds between ``degree - 1`` and
    ``2 * degree - 1`` keys. Child ``i`` of an internal node holds keys
    ``k`` with ``keys[i - 1] <= k < keys[i]``. Duplicate keys are counted
    in their leaf.
    """

    def __init__(self, degree: int = 3) -> None:
        if degree < 2:
            raise ValueError(f"degree must be at least 2, got {degree}")
        self.degree = degree
        self.root: _Node = _Leaf()

    @property
    def _max_keys(self) -> int:
        return 2 * self.degree - 1

    def _insert(self, node: _Node, key: Any) -> Optional[tuple[Any, _Node]]:
        t = self.degree
        if isinstance(node, _Leaf):
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                node.counts[index] += 1
                return None
            node.keys.insert(index, key)
            node.counts.insert(index, 1)
            if len(node.keys) <= self._max_keys:
                return None
            right = _Leaf(node.keys[t:], node.counts[t:], node.next)
            del node.keys[t:]
            del node.counts[t:]
            node.next = right
            return right.keys[0], right

        index = bisect_right(node.keys, key)
        split = self._insert(node.children[index], key)
        if split is None:
            return None
        separator, right_child = split
        node.keys.insert(index, separator)
        node.children.insert(index + 1, right_child)
        if len(node.keys) <= self._max_keys:
            return None
        separator = node.keys[t]
        right = _Internal(node.keys[t + 1 :], node.children[t + 1 :])
        del node.keys[t:]
        del node.children[t + 1 :]
        return separator, right

    def insert(self, key: Any) -> None:
        split = self._insert(self.root, key)
        if split is not None:
            separator, right = split
            self.root = _Internal([separator], [self.root, right])

    @staticmethod
    def _merge(node: _Internal, index: int) -> None:
        left = node.children[index]
        right = node.children.pop(index + 1)
        separator = node.keys.pop(index)
        if isinstance(left, _Leaf):
            left.keys.extend(right.keys)
            left.counts.extend(right.counts)
            left.next = right.next
        else:
            left.keys.append(separator)
            left.keys.extend(right.keys)
            left.children.extend(right.children)

    @staticmethod
    def _borrow_from_prev(node: _Internal, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index - 1]
        if isinstance(child, _Leaf):
            child.keys.insert(0, sibling.keys.pop())
            child.counts.insert(0, sibling.counts.pop())
            node.keys[index - 1] = child.keys[0]
        else:
            child.keys.insert(0, node.keys[index - 1])
            node.keys[index - 1] = sibling.keys.pop()
            child.children.insert(0, sibling.children.pop())

    @staticmethod
    def _borrow_from_next(node: _Internal, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        if isinstance(child, _Leaf):
            child.keys.append(sibling.keys.pop(0))
            child.counts.append(sibling.counts.pop(0))
            node.keys[index] = sibling.keys[0]
        else:
            child.keys.append(node.keys[index])
            node.keys[index] = sibling.keys.pop(0)
            child.children.append(sibling.children.pop(0))

    def _rebalance(self, node: _Internal, index: int) -> None:
        minimum = self.degree - 1
        if index > 0 and len(node.children[index - 1].keys) > minimum:
            self._borrow_from_prev(node, index)
        elif index < len(node.keys) and len(node.children[index + 1].keys) > minimum:
            self._borrow_from_next(node, index)
        elif index > 0:
            self._merge(node, index - 1)
        else:
            self._merge(node, index)

    def _delete(self, node: _Node, key: Any) -> bool:
        if isinstance(node, _Leaf):
            index = bisect_left(node.keys, key)
            if index == len(node.keys) or node.keys[index] != key:
                return False
            if node.counts[index] > 1:
                node.counts[index] -= 1
            else:
                del node.keys[index]
                del node.counts[index]
            return True
        index = bisect_right(node.keys, key)
        child = node.children[index]
        if not self._delete(child, key):
            return False
        if len(child.keys) < self.degree - 1:
            self._rebalance(node, index)
        return True

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of key; return whether it was present."""
        removed = self._delete(self.root, key)
        if isinstance(self.root, _Internal) and not self.root.keys:
            self.root = self.root.children[0]
        return removed

    def _leaves(self) -> Iterator[_Leaf]:
        node = self.root
        while isinstance(node, _Internal):
            node = node.children[0]
        leaf: Optional[_Leaf] = node
        while leaf is not None:
            yield leaf
            leaf = leaf.next

    def __iter__(self) -> Iterator[Any]:
        for leaf in self._leaves():
            for key, count in zip(leaf.keys, leaf.counts):
                for _ in range(count):
                    yield key

    def inorder(self) -> list[Any]:
        return list(self)

    def __len__(self) -> int:
        return sum(sum(leaf.counts) for leaf in self._leaves())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(degree={self.degree}, keys={self.inorder()!r})"