"""Array-backed binary max-heap and min-heap."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator

_Order = Callable[[Any, Any], bool]


def _sift_up(items: list[Any], before: _Order, index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(items[index], items[parent]):
            break
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list[Any], before: _Order, index: int) -> None:
    size = len(items)
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and before(items[child], items[best]):
                best = child
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _push(items: list[Any], before: _Order, value: Any) -> None:
    items.append(value)
    _sift_up(items, before, len(items) - 1)


def _pop(items: list[Any], before: _Order) -> Any:
    if not items:
        raise IndexError("pop from an empty heap")
    top = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, before, 0)
    return top


def _peek(items: list[Any]) -> Any:
    if not items:
        raise IndexError("peek at an empty heap")
    return items[0]


class MaxHeap:
    """Heap whose root is the largest element, stored in level order."""

    _before: _Order = staticmethod(operator.gt)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        _push(self._items, self._before, value)

    def pop(self) -> Any:
        """Remove and return the largest element."""
        return _pop(self._items, self._before)

    def peek(self) -> Any:
        """Return the largest element without removing it."""
        return _peek(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in level order, as stored."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MinHeap:
    """Heap whose root is the smallest element, stored in level order."""

    _before: _Order = staticmethod(operator.lt)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        _push(self._items, self._before, value)

    def pop(self) -> Any:
        """Remove and return the smallest element."""
        return _pop(self._items, self._before)

    def peek(self) -> Any:
        """Return the smallest element without removing it."""
        return _peek(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in level order, as stored."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"