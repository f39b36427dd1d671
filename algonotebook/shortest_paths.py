"""Single-source and all-pairs shortest paths.

Missing edges are given as ``math.inf``; unreachable vertices end at ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Iterable[tuple[int, float]]]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(
    w: Sequence[Sequence[float | None]], start: int
) -> tuple[list[float], list[int]]:
    """Shortest paths from ``start`` allowing negative weights, in O(V^3).

    ``w[i][j]`` is the cost of edge i -> j (``math.inf`` or None if absent).
    Returns ``(dist, prev)`` where ``prev[i]`` is the node before ``i`` on a
    best path, or -1. Raises NegativeCycleError on a negative cycle.
    """
    n = len(w)
    dist = [math.inf] * n
    prev = [-1] * n
    dist[start] = 0
    for k in range(n):
        for i, row in enumerate(w):
            if dist[i] == math.inf:
                continue
            for j, weight in enumerate(row):
                if weight is None:
                    continue
                candidate = dist[i] + weight
                if dist[j] > candidate:
                    if k == n - 1:
                        raise NegativeCycleError("negative-weight cycle detected")
                    dist[j] = candidate
                    prev[j] = i
    return dist, prev


def _run_dijkstra(
    graph: Adjacency, source: int, target: int | None
) -> tuple[list[float], list[int]]:
    n = len(graph)
    dist = [math.inf] * n
    prev = [-1] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, here = heapq.heappop(heap)
        if here == target:
            break
        if d != dist[here]:
            continue
        for vertex, weight in graph[here]:
            candidate = d + weight
            if candidate < dist[vertex]:
                dist[vertex] = candidate
                prev[vertex] = here
                heapq.heappush(heap, (candidate, vertex))
    return dist, prev


def dijkstra(graph: Adjacency, source: int) -> tuple[list[float], list[int]]:
    """Shortest paths from ``source`` with non-negative weights, O(E log V).

    ``graph[u]`` lists ``(v, weight)`` pairs. Returns ``(dist, prev)``.
    """
    return _run_dijkstra(graph, source, None)


def shortest_path(graph: Adjacency, source: int, target: int) -> tuple[float, list[int]]:
    """Return ``(distance, path)`` from ``source`` to ``target``.

    The path lists vertices from source to target; it is empty and the
    distance infinite when the target cannot be reached.
    """
    dist, prev = _run_dijkstra(graph, source, target)
    if dist[target] == math.inf:
        return math.inf, []
    path = []
    node = target
    while node != -1:
        path.append(node)
        node = prev[node]
    path.reverse()
    return dist[target], path


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances in O(V^3).

    ``dist[a][b]`` is the edge length (``math.inf`` if absent, 0 on the
    diagonal). Returns a new matrix; the input is left untouched.
    """
    d = [list(row) for row in dist]
    for k, dk in enumerate(d):
        for di in d:
            dik = di[k]
            if dik == math.inf:
                continue
            for j, dkj in enumerate(dk):
                if dkj != math.inf and dik + dkj < di[j]:
                    di[j] = dik + dkj
    return d