"""Tree and graph utilities: lowest common ancestors, Eulerian paths, SCCs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class LowestCommonAncestor:
    """Binary-lifting LCA over a rooted tree given by parent links."""

    def __init__(self, parents: Sequence[int]) -> None:
        n = len(parents)
        roots = [i for i, p in enumerate(parents) if p == -1]
        if len(roots) != 1:
            raise ValueError("the tree must have exactly one root")
        children: list[list[int]] = [[] for _ in range(n)]
        for node, parent in enumerate(parents):
            if parent == -1:
                continue
            if not 0 <= parent < n:
                raise ValueError(f"parent {parent} of node {node} is out of range")
            children[parent].append(node)

        self._depth = [-1] * n
        self._depth[roots[0]] = 0
        stack = [roots[0]]
        while stack:
            node = stack.pop()
            for child in children[node]:
                self._depth[child] = self._depth[node] + 1
                stack.append(child)
        if any(d < 0 for d in self._depth):
            raise ValueError("parent links do not form a tree")

        self._log = max(n.bit_length() - 1, 0)
        self._up: list[list[int]] = [list(parents)]
        for _ in range(self._log):
            prev = self._up[-1]
            self._up.append([prev[a] if a != -1 else -1 for a in prev])

    def depth(self, node: int) -> int:
        """Distance from ``node`` to the root."""
        return self._depth[node]

    def query(self, p: int, q: int) -> int:
        """Return the lowest common ancestor of ``p`` and ``q``."""
        depth, up = self._depth, self._up
        if depth[p] < depth[q]:
            p, q = q, p
        for i in range(self._log, -1, -1):
            if depth[p] - (1 << i) >= depth[q]:
                p = up[i][p]
        if p == q:
            return p
        for i in range(self._log, -1, -1):
            if up[i][p] != -1 and up[i][p] != up[i][q]:
                p = up[i][p]
                q = up[i][q]
        return up[0][p]


def eulerian_path(
    num_vertices: int, edges: Sequence[tuple[int, int]], start: int
) -> list[int]:
    """Return a walk from ``start`` using every undirected edge exactly once.

    Raises ValueError if no such walk exists.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
    for idx, (a, b) in enumerate(edges):
        if not (0 <= a < num_vertices and 0 <= b < num_vertices):
            raise ValueError(f"edge ({a}, {b}) has a vertex out of range")
        adj[a].append((b, idx))
        adj[b].append((a, idx))

    odd = {v for v, nbrs in enumerate(adj) if len(nbrs) % 2}
    if len(odd) not in (0, 2) or (odd and start not in odd):
        raise ValueError("no Eulerian path starts at this vertex")

    used = [False] * len(edges)
    stack = [start]
    path: list[int] = []
    while stack:
        v = stack[-1]
        nbrs = adj[v]
        while nbrs and used[nbrs[-1][1]]:
            nbrs.pop()
        if nbrs:
            u, idx = nbrs.pop()
            used[idx] = True
            stack.append(u)
        else:
            path.append(stack.pop())

    if len(path) != len(edges) + 1:
        raise ValueError("edges are not connected")
    path.reverse()
    return path


def strongly_connected_components(adj: Sequence[Iterable[int]]) -> list[list[int]]:
    """Kosaraju's algorithm on a directed graph given by adjacency lists.

    Components come in topological order of the condensation.
    """
    n = len(adj)
    out = [list(nbrs) for nbrs in adj]
    rev: list[list[int]] = [[] for _ in range(n)]
    for a, nbrs in enumerate(out):
        for b in nbrs:
            rev[b].append(a)

    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(out[root]))]
        while stack:
            node, it = stack[-1]
            for nb in it:
                if not visited[nb]:
                    visited[nb] = True
                    stack.append((nb, iter(out[nb])))
                    break
            else:
                stack.pop()
                order.append(node)

    assigned = [False] * n
    components: list[list[int]] = []
    for root in reversed(order):
        if assigned[root]:
            continue
        assigned[root] = True
        component = [root]
        stack = [iter(rev[root])]
        while stack:
            for nb in stack[-1]:
                if not assigned[nb]:
                    assigned[nb] = True
                    component.append(nb)
                    stack.append(iter(rev[nb]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components