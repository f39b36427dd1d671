"""Maximum bipartite matching and minimum-cost perfect matching."""

from __future__ import annotations

from collections.abc import Sequence


def bipartite_matching(w: Sequence[Sequence[object]]) -> tuple[int, list[int], list[int]]:
    """Maximum matching by augmenting paths, O(E V).

    ``w[i][j]`` is truthy when row node ``i`` may pair with column node ``j``.
    Returns ``(matches, row_mate, col_mate)`` with -1 for unmatched nodes.
    """
    rows = len(w)
    cols = len(w[0]) if rows else 0
    row_mate = [-1] * rows
    col_mate = [-1] * cols

    def find_match(i: int, seen: list[bool]) -> bool:
        for j, edge in enumerate(w[i]):
            if edge and not seen[j]:
                seen[j] = True
                if col_mate[j] < 0 or find_match(col_mate[j], seen):
                    row_mate[i] = j
                    col_mate[j] = i
                    return True
        return False

    count = 0
    for i in range(rows):
        if find_match(i, [False] * cols):
            count += 1
    return count, row_mate, col_mate


def min_cost_matching(cost: Sequence[Sequence[float]]) -> tuple[float, list[int], list[int]]:
    """Minimum-cost perfect matching in a dense n x n bipartite graph, O(n^3).

    Costs may be negative; negate them to maximize. Returns
    ``(value, left_mate, right_mate)``.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")
    if n == 0:
        return 0.0, [], []

    u = [min(row) for row in cost]
    v = [min(cost[i][j] - u[i] for i in range(n)) for j in range(n)]

    left = [-1] * n
    right = [-1] * n
    mated = 0
    for i in range(n):
        for j in range(n):
            if right[j] != -1:
                continue
            if abs(cost[i][j] - u[i] - v[j]) < 1e-10:
                left[i] = j
                right[j] = i
                mated += 1
                break

    while mated < n:
        s = left.index(-1)
        dad = [-1] * n
        seen = [False] * n
        dist = [cost[s][k] - u[s] - v[k] for k in range(n)]

        while True:
            j = min((k for k in range(n) if not seen[k]), key=dist.__getitem__)
            seen[j] = True
            if right[j] == -1:
                break
            i = right[j]
            for k in range(n):
                if seen[k]:
                    continue
                new_dist = dist[j] + cost[i][k] - u[i] - v[k]
                if dist[k] > new_dist:
                    dist[k] = new_dist
                    dad[k] = j

        for k in range(n):
            if k == j or not seen[k]:
                continue
            i = right[k]
            v[k] += dist[k] - dist[j]
            u[i] -= dist[k] - dist[j]
        u[s] += dist[j]

        while dad[j] >= 0:
            d = dad[j]
            right[j] = right[d]
            left[right[j]] = j
            j = d
        right[j] = s
        left[s] = j
        mated += 1

    value = sum(cost[i][left[i]] for i in range(n))
    return value, left, right