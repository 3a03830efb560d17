"""Greedy graph algorithms on adjacency matrices: Dijkstra, Kruskal and Prim.

A matrix entry of 0 means there is no edge between the two vertices.
Vertices are numbered from 0.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An edge of a spanning tree, in the order the algorithm chose it."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class ShortestPath:
    """The shortest route from the start vertex to ``target``.

    ``path`` runs from the start to ``target``. An unreachable target has
    ``distance`` of ``None`` and an empty ``path``.
    """

    target: int
    distance: int | None
    path: tuple[int, ...]


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def dijkstra(cost: Sequence[Sequence[int]], start: int) -> list[ShortestPath]:
    """Return the shortest path from ``start`` to every other vertex.

    Results are ordered by target vertex. The next vertex settled is the
    unvisited one with the smallest distance, the lowest index on ties.
    """
    matrix = _square(cost)
    size = len(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is out of range")
    if any(w < 0 for row in matrix for w in row):
        raise ValueError("edge weights must not be negative")

    def weight(i: int, j: int) -> float:
        w = matrix[i][j]
        return w if w != 0 else math.inf

    distance = [weight(start, i) for i in range(size)]
    previous = [start] * size
    distance[start] = 0
    visited = {start}

    while len(visited) < size:
        pending = [i for i in range(size) if i not in visited and distance[i] < math.inf]
        if not pending:
            break
        node = min(pending, key=lambda i: distance[i])
        visited.add(node)
        for i in range(size):
            if i not in visited:
                through = distance[node] + weight(node, i)
                if through < distance[i]:
                    distance[i] = through
                    previous[i] = node

    results = []
    for target in range(size):
        if target == start:
            continue
        if distance[target] == math.inf:
            results.append(ShortestPath(target, None, ()))
            continue
        route = [target]
        while route[-1] != start:
            route.append(previous[route[-1]])
        results.append(ShortestPath(target, distance[target], tuple(reversed(route))))
    return results


def kruskal(adjacency: Sequence[Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree, cheapest edges first.

    Edges are taken by weight, then by row and column of the matrix; an
    edge joining two vertices already connected is dropped.
    """
    matrix = _square(adjacency)
    size = len(matrix)
    candidates = sorted(
        (w, i, j)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if w != 0
    )
    parent = list(range(size))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    seen: set[frozenset[int]] = set()
    tree: list[Edge] = []
    for w, i, j in candidates:
        if len(tree) == size - 1:
            break
        key = frozenset((i, j))
        if key in seen:
            continue
        seen.add(key)
        root_i, root_j = find(i), find(j)
        if root_i != root_j:
            parent[root_j] = root_i
            tree.append(Edge(i, j, w))
    if size and len(tree) < size - 1:
        raise ValueError("graph is not connected")
    return tree


def prim(adjacency: Sequence[Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree grown from vertex 0.

    Each step adds the cheapest edge from a visited vertex to an unvisited
    one, scanning visited vertices and then columns in increasing order.
    """
    matrix = _square(adjacency)
    size = len(matrix)
    if size == 0:
        return []
    visited = {0}
    tree: list[Edge] = []
    while len(visited) < size:
        best: tuple[int, int, int] | None = None
        for i in sorted(visited):
            for j, w in enumerate(matrix[i]):
                if j not in visited and w != 0 and (best is None or w < best[0]):
                    best = (w, i, j)
        if best is None:
            raise ValueError("graph is not connected")
        w, i, j = best
        tree.append(Edge(i, j, w))
        visited.add(j)
    return tree