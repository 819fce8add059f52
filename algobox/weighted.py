"""Weighted graphs given as square cost matrices: shortest paths and spanning trees."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

#: Marks a missing edge in the matrices that :func:`prim_mst` takes.
NO_EDGE = 999

#: The default "no edge" weight of :func:`cheapest_edges`.
CHEAPEST_INFINITY = 99999


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    v1: int
    v2: int
    weight: int


@dataclass(frozen=True)
class ShortestPaths:
    """Shortest distances from *start*, with the predecessor of each vertex on its path.

    Unreachable vertices have an infinite distance.
    """

    start: int
    distances: tuple[float, ...]
    predecessors: tuple[int, ...]

    def path_to(self, node: int) -> list[int]:
        """Return the vertices of a shortest path from the start to *node*."""
        if not 0 <= node < len(self.distances):
            raise IndexError(f"vertex {node} is not in the graph")
        if math.isinf(self.distances[node]):
            raise ValueError(f"vertex {node} cannot be reached from {self.start}")
        path = [node]
        while node != self.start:
            node = self.predecessors[node]
            path.append(node)
        return path[::-1]


def _square_size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is not between 0 and {n - 1}")


def dijkstra_paths(matrix: Sequence[Sequence[int]], start: int) -> ShortestPaths:
    """Run Dijkstra's algorithm from *start*; a zero entry means there is no edge."""
    n = _square_size(matrix)
    _check_vertex(start, n)

    def cost(i: int, j: int) -> float:
        return matrix[i][j] or math.inf

    distance = [cost(start, i) for i in range(n)]
    predecessor = [start] * n
    distance[start] = 0
    visited = {start}
    for _ in range(n - 2):
        candidates = [i for i in range(n) if i not in visited and distance[i] < math.inf]
        if not candidates:
            break
        nearest = min(candidates, key=distance.__getitem__)
        visited.add(nearest)
        for i in range(n):
            if i not in visited and distance[nearest] + cost(nearest, i) < distance[i]:
                distance[i] = distance[nearest] + cost(nearest, i)
                predecessor[i] = nearest
    return ShortestPaths(start, tuple(distance), tuple(predecessor))


def dijkstra_distances(matrix: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return the shortest distance from *source* to every vertex (infinite if unreachable)."""
    return list(dijkstra_paths(matrix, source).distances)


class DisjointSet:
    """Disjoint sets over the elements 0..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size + 1))

    def find_root(self, v: int) -> int:
        """Return the representative of the set holding *v*."""
        if not 0 <= v < len(self._parent):
            raise IndexError(f"element {v} is not in the set")
        while v != self._parent[v]:
            v = self._parent[v]
        return v

    def union(self, v1: int, v2: int) -> None:
        """Merge the sets holding *v1* and *v2*."""
        r1, r2 = self.find_root(v1), self.find_root(v2)
        if r1 == r2:
            return
        if v1 == r1:
            self._parent[v1] = v2
        elif v2 == r2:
            self._parent[v2] = v1
        else:
            self._parent[r1] = r2


def prim_mst(matrix: Sequence[Sequence[int]], start: int) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown from *start*, in the order added.

    Entries of :data:`NO_EDGE` or more mean there is no edge. Each edge runs
    from a vertex already in the tree to the vertex it brings in.
    """
    n = _square_size(matrix)
    _check_vertex(start, n)
    in_tree = {start}
    tree: list[Edge] = []
    while len(in_tree) < n:
        crossing = (
            (i, j)
            for i in range(n)
            if i in in_tree
            for j in range(n)
            if j not in in_tree and matrix[i][j] < NO_EDGE
        )
        best = min(crossing, key=lambda edge: matrix[edge[0]][edge[1]], default=None)
        if best is None:
            raise ValueError("the graph is not connected")
        i, j = best
        tree.append(Edge(i, j, matrix[i][j]))
        in_tree.add(j)
    return tree


def cheapest_edges(
    matrix: Sequence[Sequence[int]], infinity: int = CHEAPEST_INFINITY
) -> list[Edge]:
    """Return, for each vertex, its cheapest edge.

    Zero entries and entries of *infinity* or more are not edges; a vertex
    without any edge gets the entry in column 0.
    """
    _square_size(matrix)
    result = []
    for i, row in enumerate(matrix):
        candidates = (j for j, weight in enumerate(row) if weight != 0 and weight < infinity)
        best = min(candidates, key=row.__getitem__, default=0)
        result.append(Edge(i, best, row[best]))
    return result