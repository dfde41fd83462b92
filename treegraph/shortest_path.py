"""Single-source shortest distances with Dijkstra's algorithm."""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence, Union

Distance = Union[int, float]


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, Distance]]], source: int
) -> list[Distance]:
    """Shortest distances from source over directed weighted edges.

    ``adjacency[u]`` holds ``(v, weight)`` pairs. Unreachable vertices get
    ``math.inf``.
    """
    count = len(adjacency)
    if not 0 <= source < count:
        raise ValueError(
            f"source vertex {source} is out of range; expected 0 to {count - 1}"
        )
    edges = [list(neighbours) for neighbours in adjacency]
    distances: list[Distance] = [math.inf] * count
    distances[source] = 0
    unvisited = set(range(count))
    while unvisited:
        u = min(unvisited, key=lambda vertex: (distances[vertex], vertex))
        if distances[u] == math.inf:
            break
        unvisited.discard(u)
        for v, weight in edges[u]:
            if v in unvisited and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
    return distances


def dijkstra_matrix(matrix: Sequence[Sequence[Any]], source: int) -> list[Distance]:
    """Shortest distances from source over a square weight matrix.

    ``matrix[i][j]`` is the weight of the edge from ``i`` to ``j``; an
    off-diagonal ``0`` or ``None`` means there is no edge, and the diagonal
    is ignored.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("weight matrix must be square")
    adjacency = [
        [
            (j, weight)
            for j, weight in enumerate(row)
            if j != i and weight is not None and weight != 0
        ]
        for i, row in enumerate(rows)
    ]
    return dijkstra(adjacency, source)