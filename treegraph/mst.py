"""Minimum spanning trees with Prim's and Kruskal's algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence, Union

Weight = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    source: int
    target: int
    weight: Weight


@dataclass(frozen=True)
class SpanningTree:
    """The edges chosen for a spanning tree (or forest)."""

    edges: tuple[Edge, ...]

    def total_weight(self) -> Weight:
        return sum(edge.weight for edge in self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


def _square_rows(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("weight matrix must be square")
    return rows


def _is_edge(i: int, j: int, weight: Any) -> bool:
    return i != j and weight is not None and weight != 0


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is out of range; expected 0 to {count - 1}")


def prim(
    adjacency: Sequence[Iterable[tuple[int, Weight]]], start: int = 0
) -> SpanningTree:
    """Minimum spanning tree grown from start.

    ``adjacency[u]`` holds ``(v, weight)`` pairs; for an undirected graph
    each edge should appear in the lists of both endpoints. The tree has one
    edge ``(parent, vertex, weight)`` for every vertex other than start, in
    ascending vertex order. Raises ValueError if some vertex is unreachable.
    """
    neighbours = [list(pairs) for pairs in adjacency]
    count = len(neighbours)
    _check_vertex(start, count)

    key: list[Weight] = [math.inf] * count
    parent: list[int] = [-1] * count
    key[start] = 0
    in_tree: set[int] = set()

    for _ in range(count):
        u = min(
            (v for v in range(count) if v not in in_tree),
            key=lambda v: (key[v], v),
        )
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree.add(u)
        for v, weight in neighbours[u]:
            _check_vertex(v, count)
            if v not in in_tree and weight < key[v]:
                parent[v] = u
                key[v] = weight

    return SpanningTree(
        tuple(Edge(parent[v], v, key[v]) for v in range(count) if v != start)
    )


def prim_matrix(matrix: Sequence[Sequence[Any]], start: int = 0) -> SpanningTree:
    """Prim's algorithm over a square weight matrix.

    An off-diagonal ``0`` or ``None`` means there is no edge; the diagonal
    is ignored.
    """
    rows = _square_rows(matrix)
    adjacency = [
        [(j, weight) for j, weight in enumerate(row) if _is_edge(i, j, weight)]
        for i, row in enumerate(rows)
    ]
    return prim(adjacency, start)


def edges_from_matrix(matrix: Sequence[Sequence[Any]]) -> list[Edge]:
    """Edges of a symmetric weight matrix, read from its upper triangle.

    An entry of ``0`` or ``None`` means there is no edge.
    """
    rows = _square_rows(matrix)
    return [
        Edge(i, j, weight)
        for i, row in enumerate(rows)
        for j, weight in enumerate(row)
        if j > i and _is_edge(i, j, weight)
    ]


class _DisjointSets:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets holding a and b; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True


def kruskal(
    vertex_count: int, edges: Iterable[Union[Edge, tuple[int, int, Weight]]]
) -> SpanningTree:
    """Minimum spanning tree (a forest if the graph is disconnected).

    Edges may be Edge objects or ``(source, target, weight)`` tuples. They
    are considered by ascending weight, ties in the order given.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        _check_vertex(edge.source, vertex_count)
        _check_vertex(edge.target, vertex_count)

    sets = _DisjointSets(vertex_count)
    chosen: list[Edge] = []
    for edge in sorted(candidates, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(edge.source, edge.target):
            chosen.append(edge)
    return SpanningTree(tuple(chosen))


def kruskal_matrix(matrix: Sequence[Sequence[Any]]) -> SpanningTree:
    """Kruskal's algorithm over a symmetric weight matrix."""
    edges = edges_from_matrix(matrix)
    return kruskal(len(matrix), edges)