"""Depth-first and breadth-first search over graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence


def adjacency_from_matrix(matrix: Sequence[Sequence[Any]]) -> list[list[int]]:
    """Turn a square adjacency matrix into adjacency lists.

    A truthy entry at ``matrix[i][j]`` is an edge from ``i`` to ``j``.
    Neighbours are listed in ascending order.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return [[j for j, entry in enumerate(row) if entry] for row in rows]


def _check_vertices(adjacency: Sequence[Sequence[int]], *vertices: int) -> None:
    count = len(adjacency)
    for vertex in vertices:
        if not 0 <= vertex < count:
            raise ValueError(
                f"vertex {vertex} is out of range; expected 0 to {count - 1}"
            )


def depth_first_path(
    adjacency: Sequence[Sequence[int]], source: int, target: int
) -> list[int]:
    """Walk from source, always taking the first unvisited neighbour.

    The walk stops at target, or at the first vertex with no unvisited
    neighbour; it does not backtrack. Returns the vertices visited in order.
    """
    _check_vertices(adjacency, source, target)
    visited: set[int] = set()
    path = [source]
    current = source
    while current != target:
        visited.add(current)
        following = next(
            (vertex for vertex in adjacency[current] if vertex not in visited), None
        )
        if following is None:
            break
        path.append(following)
        current = following
    return path


def breadth_first_order(
    adjacency: Sequence[Sequence[int]], source: int, target: int
) -> list[int]:
    """Vertices in the order a breadth-first search from source discovers them.

    The search stops as soon as target is discovered as a neighbour; if it
    never is (including when target is source), every vertex reachable from
    source is returned.
    """
    _check_vertices(adjacency, source, target)
    order = [source]
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour in visited:
                continue
            order.append(neighbour)
            visited.add(neighbour)
            if neighbour == target:
                return order
            queue.append(neighbour)
    return order