"""Graph traversals and single-source shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

__all__ = ["bfs_order", "dfs_order", "shortest_distances"]


def _square_size(matrix: Sequence[Sequence[object]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} is outside 0..{size - 1}")


def bfs_order(adjacency: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return every vertex in breadth-first order, starting at ``source``.

    ``adjacency`` is a square 0/1 matrix; an entry equal to 1 is an edge.
    Vertices not reachable from ``source`` are visited afterwards by
    starting fresh searches from them in index order.
    """
    size = _square_size(adjacency)
    _check_vertex(source, size)

    visited = [False] * size
    order: list[int] = []
    for root in itertools.chain((source,), range(size)):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v, edge in enumerate(adjacency[u]):
                if edge == 1 and not visited[v]:
                    visited[v] = True
                    order.append(v)
                    queue.append(v)
    return order


def _neighbours(
    adjacency_list: Mapping[int, Iterable[int]] | Sequence[Iterable[int]],
    vertex: int,
) -> Iterable[int]:
    if isinstance(adjacency_list, Mapping):
        return adjacency_list.get(vertex, ())
    if 0 <= vertex < len(adjacency_list):
        return adjacency_list[vertex]
    return ()


def dfs_order(
    adjacency_list: Mapping[int, Iterable[int]] | Sequence[Iterable[int]],
    start: int,
) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    ``adjacency_list`` maps each vertex to its neighbours, either as a
    mapping or as a sequence indexed by vertex. Neighbours are explored in
    the order they are listed.
    """
    if not isinstance(adjacency_list, Mapping):
        _check_vertex(start, len(adjacency_list))

    order = [start]
    visited = {start}
    stack = [iter(_neighbours(adjacency_list, start))]
    while stack:
        for vertex in stack[-1]:
            if vertex not in visited:
                visited.add(vertex)
                order.append(vertex)
                stack.append(iter(_neighbours(adjacency_list, vertex)))
                break
        else:
            stack.pop()
    return order


def shortest_distances(
    cost: Sequence[Sequence[float | None]], source: int
) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    ``cost`` is a square matrix of edge weights; ``None`` or ``math.inf``
    marks a missing edge and the diagonal is ignored. Unreachable vertices
    get ``math.inf``. Negative weights raise ``ValueError``.
    """
    size = _square_size(cost)
    _check_vertex(source, size)
    for row in cost:
        for weight in row:
            if weight is not None and weight < 0:
                raise ValueError("edge weights must not be negative")

    distances: list[float] = [math.inf] * size
    distances[source] = 0
    done = [False] * size
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dist, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for w, weight in enumerate(cost[u]):
            if w == u or weight is None or weight == math.inf or done[w]:
                continue
            candidate = dist + weight
            if candidate < distances[w]:
                distances[w] = candidate
                heapq.heappush(heap, (candidate, w))
    return distances