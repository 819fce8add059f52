"""Unweighted graphs: adjacency structures, breadth- and depth-first search, topological order.

The free functions number vertices from 1 to n. An adjacency matrix for n
vertices therefore has n + 1 rows and columns, the first of each unused, so
that a vertex is its own index. :class:`Graph` numbers its vertices from 0.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("the number of vertices must not be negative")


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is not between 1 and {n}")


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return the 0/1 adjacency matrix of an undirected graph on vertices 1..n."""
    _check_count(n)
    matrix = [[0] * (n + 1) for _ in range(n + 1)]
    for x, y in edges:
        _check_vertex(x, n)
        _check_vertex(y, n)
        matrix[x][y] = 1
        matrix[y][x] = 1
    return matrix


def adjacency_list(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    """Return the neighbours of each vertex 1..n of an undirected graph, in edge order."""
    _check_count(n)
    neighbours: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    for x, y in edges:
        _check_vertex(x, n)
        _check_vertex(y, n)
        neighbours[x].append(y)
        neighbours[y].append(x)
    return neighbours


def _matrix_size(matrix: Sequence[Sequence[int]]) -> int:
    if not matrix:
        raise ValueError("the matrix must have at least one row")
    return len(matrix) - 1


def bfs_order(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reached from *start* in breadth-first order.

    Neighbours are taken in increasing vertex order.
    """
    n = _matrix_size(matrix)
    _check_vertex(start, n)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in range(1, n + 1):
            if v not in visited and matrix[u][v] == 1:
                visited.add(v)
                order.append(v)
                queue.append(v)
    return order


def dfs_order(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reached from *start* in depth-first (pre-)order.

    Neighbours are taken in increasing vertex order.
    """
    n = _matrix_size(matrix)
    _check_vertex(start, n)
    visited = {start}
    order = [start]
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(1, n + 1)))]
    while stack:
        u, pending = stack[-1]
        for v in pending:
            if v not in visited and matrix[u][v] == 1:
                visited.add(v)
                order.append(v)
                stack.append((v, iter(range(1, n + 1))))
                break
        else:
            stack.pop()
    return order


def bfs_distances(
    n: int, edges: Iterable[tuple[int, int]], source: int
) -> dict[int, int | None]:
    """Return the number of edges on a shortest path from *source* to each vertex 1..n.

    Vertices that cannot be reached map to None.
    """
    neighbours = adjacency_list(n, edges)
    _check_vertex(source, n)
    distance: dict[int, int | None] = dict.fromkeys(neighbours)
    distance[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for other in neighbours[node]:
            if distance[other] is None:
                distance[other] = distance[node] + 1
                queue.append(other)
    return distance


class Graph:
    """A directed graph on vertices 0..vertices-1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is not between 0 and {self.vertices - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from *v* to *w*."""
        self._check(v)
        self._check(w)
        self._adjacent[v].append(w)

    def topological_sort(self) -> list[int]:
        """Return the vertices in reverse depth-first finishing order.

        Searches start from each unvisited vertex in increasing order; for a
        graph without cycles every edge then points forward in the result.
        """
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacent[root]))]
            while stack:
                v, pending = stack[-1]
                for w in pending:
                    if not visited[w]:
                        visited[w] = True
                        stack.append((w, iter(self._adjacent[w])))
                        break
                else:
                    stack.pop()
                    finished.append(v)
        return finished[::-1]