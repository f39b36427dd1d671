"""Minimum spanning trees and forests (Kruskal and Prim).

Weights come as a symmetric matrix in which -1 marks a missing edge.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def kruskal(w: Sequence[Sequence[float]]) -> tuple[float, list[tuple[int, int]]]:
    """Minimum spanning forest by Kruskal's algorithm with union-find.

    Entries with negative weight are treated as absent. Returns
    ``(total weight, edges)``.
    """
    n = len(w)
    candidates = sorted(
        (d, i, j)
        for i, row in enumerate(w)
        for j, d in enumerate(row)
        if j > i and d >= 0
    )
    parent = list(range(n))
    rank = [0] * n

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    total: float = 0
    tree: list[tuple[int, int]] = []
    for d, u, v in candidates:
        if len(tree) >= n - 1:
            break
        ru, rv = find(u), find(v)
        if ru == rv:
            continue
        tree.append((u, v))
        total += d
        if rank[ru] > rank[rv]:
            parent[rv] = ru
        elif rank[rv] > rank[ru]:
            parent[ru] = rv
        else:
            parent[rv] = ru
            rank[ru] += 1
    return total, tree


def prim(w: Sequence[Sequence[float]]) -> tuple[float, list[tuple[int, int]]]:
    """Minimum spanning tree by Prim's algorithm in O(V^2).

    Weights must be non-negative and symmetric, -1 for missing edges.
    Returns ``(total weight, edges)`` with edges as ``(parent, child)``
    ordered by child.
    """
    n = len(w)
    if n == 0:
        return 0, []
    found = [False] * n
    prev = [-1] * n
    dist = [math.inf] * n
    dist[0] = 0
    here = 0
    while here != -1:
        found[here] = True
        best = -1
        for k, weight in enumerate(w[here]):
            if found[k]:
                continue
            if weight != -1 and dist[k] > weight:
                dist[k] = weight
                prev[k] = here
            if best == -1 or dist[k] < dist[best]:
                best = k
        here = best

    edges = [(p, i) for i, p in enumerate(prev) if p != -1]
    total = sum(w[p][i] for p, i in edges)
    return total, edges