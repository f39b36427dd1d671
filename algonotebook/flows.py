"""Maximum flow, min-cost maximum flow and global minimum cut."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


def _check_terminals(n: int, s: int, t: int) -> None:
    if not (0 <= s < n and 0 <= t < n):
        raise ValueError("source or sink out of range")
    if s == t:
        raise ValueError("source and sink must differ")


@dataclass(slots=True)
class _Edge:
    u: int
    v: int
    cap: int
    flow: int = 0


class Dinic:
    """Adjacency-list Dinic blocking flow, O(V^2 E).

    Each added edge is stored with a zero-capacity residual partner.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._edges: list[_Edge] = []
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._level = [0] * n
        self._ptr = [0] * n

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v``; self-loops are ignored."""
        if u == v:
            return
        self._edges.append(_Edge(u, v, cap))
        self._graph[u].append(len(self._edges) - 1)
        self._edges.append(_Edge(v, u, 0))
        self._graph[v].append(len(self._edges) - 1)

    def _bfs(self, s: int, t: int) -> bool:
        unreached = self.n + 1
        level = [unreached] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            if u == t:
                break
            for k in self._graph[u]:
                e = self._edges[k]
                if e.flow < e.cap and level[e.v] > level[u] + 1:
                    level[e.v] = level[u] + 1
                    queue.append(e.v)
        self._level = level
        return level[t] != unreached

    def _dfs(self, u: int, t: int, flow: int | None) -> int:
        if u == t or flow == 0:
            return flow or 0
        adj = self._graph[u]
        while self._ptr[u] < len(adj):
            k = adj[self._ptr[u]]
            e = self._edges[k]
            if self._level[e.v] == self._level[u] + 1:
                amt = e.cap - e.flow
                if flow is not None and amt > flow:
                    amt = flow
                pushed = self._dfs(e.v, t, amt)
                if pushed:
                    e.flow += pushed
                    self._edges[k ^ 1].flow -= pushed
                    return pushed
            self._ptr[u] += 1
        return 0

    def max_flow(self, s: int, t: int) -> int:
        """Return the maximum flow from ``s`` to ``t``."""
        _check_terminals(self.n, s, t)
        total = 0
        while self._bfs(s, t):
            self._ptr = [0] * self.n
            while pushed := self._dfs(s, t, None):
                total += pushed
        return total


class MatrixMaxFlow:
    """Adjacency-matrix blocking flow, O(V^4)."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.cap = [[0] * n for _ in range(n)]
        self.flow = [[0] * n for _ in range(n)]

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add capacity ``cap`` to the edge ``u -> v``."""
        self.cap[u][v] += cap

    def _blocking_flow(self, s: int, t: int) -> int:
        n, cap, flow = self.n, self.cap, self.flow
        dad = [-1] * n
        dad[s] = -2
        queue = deque([s])
        while queue:
            x = queue.popleft()
            for i in range(n):
                if dad[i] == -1 and cap[x][i] - flow[x][i] > 0:
                    dad[i] = x
                    queue.append(i)
        if dad[t] == -1:
            return 0

        total = 0
        for i in range(n):
            if dad[i] == -1:
                continue
            amt = cap[i][t] - flow[i][t]
            j = i
            while amt and j != s:
                amt = min(amt, cap[dad[j]][j] - flow[dad[j]][j])
                j = dad[j]
            if amt == 0:
                continue
            flow[i][t] += amt
            flow[t][i] -= amt
            j = i
            while j != s:
                flow[dad[j]][j] += amt
                flow[j][dad[j]] -= amt
                j = dad[j]
            total += amt
        return total

    def max_flow(self, s: int, t: int) -> int:
        """Return the maximum flow from ``s`` to ``t``."""
        _check_terminals(self.n, s, t)
        total = 0
        while pushed := self._blocking_flow(s, t):
            total += pushed
        return total


@dataclass(slots=True)
class _PREdge:
    src: int
    dst: int
    cap: int
    flow: int
    index: int


class PushRelabel:
    """FIFO push-relabel maximum flow with the gap heuristic, O(V^3).

    ``max_flow`` is meant to be called once per instance.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._g: list[list[_PREdge]] = [[] for _ in range(n)]
        self._excess = [0] * n
        self._dist = [0] * n
        self._active = [False] * n
        self._count = [0] * (2 * n + 1)
        self._queue: deque[int] = deque()

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap``."""
        forward = _PREdge(u, v, cap, 0, len(self._g[v]))
        self._g[u].append(forward)
        if u == v:
            forward.index += 1
        self._g[v].append(_PREdge(v, u, 0, 0, len(self._g[u]) - 1))

    def _enqueue(self, v: int) -> None:
        if not self._active[v] and self._excess[v] > 0:
            self._active[v] = True
            self._queue.append(v)

    def _push(self, e: _PREdge) -> None:
        amt = min(self._excess[e.src], e.cap - e.flow)
        if self._dist[e.src] <= self._dist[e.dst] or amt == 0:
            return
        e.flow += amt
        self._g[e.dst][e.index].flow -= amt
        self._excess[e.dst] += amt
        self._excess[e.src] -= amt
        self._enqueue(e.dst)

    def _gap(self, k: int) -> None:
        for v in range(self.n):
            if self._dist[v] < k:
                continue
            self._count[self._dist[v]] -= 1
            self._dist[v] = max(self._dist[v], self.n + 1)
            self._count[self._dist[v]] += 1
            self._enqueue(v)

    def _relabel(self, v: int) -> None:
        self._count[self._dist[v]] -= 1
        best = 2 * self.n
        for e in self._g[v]:
            if e.cap - e.flow > 0:
                best = min(best, self._dist[e.dst] + 1)
        self._dist[v] = best
        self._count[best] += 1
        self._enqueue(v)

    def _discharge(self, v: int) -> None:
        for e in self._g[v]:
            if self._excess[v] <= 0:
                break
            self._push(e)
        if self._excess[v] > 0:
            if self._count[self._dist[v]] == 1:
                self._gap(self._dist[v])
            else:
                self._relabel(v)

    def max_flow(self, s: int, t: int) -> int:
        """Return the maximum flow from ``s`` to ``t``."""
        _check_terminals(self.n, s, t)
        self._count[0] = self.n - 1
        self._count[self.n] = 1
        self._dist[s] = self.n
        self._active[s] = self._active[t] = True
        for e in self._g[s]:
            self._excess[s] += e.cap
            self._push(e)
        while self._queue:
            v = self._queue.popleft()
            self._active[v] = False
            self._discharge(v)
        return sum(e.flow for e in self._g[s])


_INF = (2**63 - 1) // 4


class MinCostMaxFlow:
    """Min-cost max-flow by successive shortest paths with potentials.

    Forward and reverse edges are kept separately, so ``cap[u][v]`` and
    ``cap[v][u]`` may differ. Each augmentation costs O(V^2).
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.cap = [[0] * n for _ in range(n)]
        self.flow = [[0] * n for _ in range(n)]
        self.cost = [[0] * n for _ in range(n)]
        self._pi = [0] * n

    def add_edge(self, u: int, v: int, cap: int, cost: int) -> None:
        """Set the capacity and unit cost of the edge ``u -> v``."""
        self.cap[u][v] = cap
        self.cost[u][v] = cost

    def _dijkstra(self, s: int, t: int) -> tuple[int, list[tuple[int, int]]]:
        n, pi = self.n, self._pi
        found = [False] * n
        dist = [_INF] * n
        width = [0] * n
        dad = [(-1, 0)] * n
        dist[s] = 0
        width[s] = _INF

        def relax(src: int, k: int, cap: int, cost: int, direction: int) -> None:
            val = dist[src] + pi[src] - pi[k] + cost
            if cap and val < dist[k]:
                dist[k] = val
                dad[k] = (src, direction)
                width[k] = min(cap, width[src])

        while s != -1:
            best = -1
            found[s] = True
            for k in range(n):
                if found[k]:
                    continue
                relax(s, k, self.cap[s][k] - self.flow[s][k], self.cost[s][k], 1)
                relax(s, k, self.flow[k][s], -self.cost[k][s], -1)
                if best == -1 or dist[k] < dist[best]:
                    best = k
            s = best

        for k in range(n):
            pi[k] = min(pi[k] + dist[k], _INF)
        return width[t], dad

    def max_flow(self, s: int, t: int) -> tuple[int, int]:
        """Return ``(maximum flow, minimum cost)`` from ``s`` to ``t``."""
        _check_terminals(self.n, s, t)
        total_flow = total_cost = 0
        while True:
            amt, dad = self._dijkstra(s, t)
            if not amt:
                break
            total_flow += amt
            x = t
            while x != s:
                prev, direction = dad[x]
                if direction == 1:
                    self.flow[prev][x] += amt
                    total_cost += amt * self.cost[prev][x]
                else:
                    self.flow[x][prev] -= amt
                    total_cost -= amt * self.cost[x][prev]
                x = prev
        return total_flow, total_cost


def min_cut(weights: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Stoer-Wagner global minimum cut of an undirected graph, O(V^3).

    ``weights`` is a symmetric matrix and is left untouched. Returns
    ``(cut weight, vertices merged up to the best phase)``.
    """
    w = [list(row) for row in weights]
    n = len(w)
    if n < 2:
        raise ValueError("a cut needs at least two vertices")
    used = [False] * n
    cut: list[int] = []
    best_cut: list[int] = []
    best_weight = -1

    for phase in range(n - 1, -1, -1):
        links = list(w[0])
        added = list(used)
        prev = last = 0
        for i in range(phase):
            prev = last
            last = -1
            for j in range(1, n):
                if not added[j] and (last == -1 or links[j] > links[last]):
                    last = j
            if i == phase - 1:
                w[prev] = [a + b for a, b in zip(w[prev], w[last])]
                for j in range(n):
                    w[j][prev] = w[prev][j]
                used[last] = True
                cut.append(last)
                if best_weight == -1 or links[last] < best_weight:
                    best_cut = list(cut)
                    best_weight = links[last]
            else:
                links = [a + b for a, b in zip(links, w[last])]
                added[last] = True
    return best_weight, best_cut