"""Binary labelling by reduction to a minimum s-t cut.

Solves

    minimize  sum_i psi[i][x_i] + sum_{i<j} phi[i][j][x_i][x_j]

over ``x`` in {0, 1}^n. Each pairwise term must satisfy
``phi(0,0) + phi(1,1) <= phi(0,1) + phi(1,0)``. With ``maximize`` set, the
objective is maximized instead and the inequality is reversed.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

PairTerms = Sequence[Sequence[Sequence[Sequence[float]]]]
UnaryTerms = Sequence[Sequence[float]]


def graph_cut_inference(
    phi: PairTerms, psi: UnaryTerms, maximize: bool = True
) -> tuple[float, list[int]]:
    """Return ``(optimal value, assignment)`` for the labelling problem.

    ``psi[i][u]`` is the unary term of variable ``i`` taking label ``u`` and
    ``phi[i][j][u][v]`` the pairwise term for ``x_i = u, x_j = v``. The pairwise
    table must be given for both orders, with
    ``phi[j][i][v][u] == phi[i][j][u][v]``. Raises ValueError when a pairwise
    term breaks the required inequality.
    """
    m = len(phi)
    if len(psi) != m:
        raise ValueError("phi and psi describe different numbers of variables")
    size = m + 2
    source, sink = m, m + 1
    cap = [[0] * size for _ in range(size)]
    b = [0] * m
    c = 0

    for i in range(m):
        b[i] += psi[i][1] - psi[i][0]
        c += psi[i][0]
        for j in range(i):
            b[i] += phi[i][j][1][1] - phi[i][j][0][1]
        for j in range(i + 1, m):
            p = phi[i][j]
            cap[i][j] = p[0][1] + p[1][0] - p[0][0] - p[1][1]
            b[i] += p[1][0] - p[0][0]
            c += p[0][0]

    if maximize:
        for i in range(m):
            for j in range(i + 1, m):
                cap[i][j] = -cap[i][j]
        b = [-v for v in b]
        c = -c

    for i in range(m):
        for j in range(i + 1, m):
            if cap[i][j] < 0:
                raise ValueError(
                    f"pairwise term ({i}, {j}) cannot be represented as a cut"
                )

    for i, bi in enumerate(b):
        if bi >= 0:
            cap[source][i] = bi
        else:
            cap[i][sink] = -bi
            c += bi

    flow = [[0] * size for _ in range(size)]
    reached = [False] * size

    def augment(u: int, amount: float) -> float:
        reached[u] = True
        if u == sink:
            return amount
        for k in range(size):
            if reached[k]:
                continue
            room = min(amount, cap[u][k] - flow[u][k])
            if room > 0:
                pushed = augment(k, room)
                if pushed:
                    flow[u][k] += pushed
                    flow[k][u] -= pushed
                    return pushed
        return 0

    total = 0
    while amount := augment(source, math.inf):
        total += amount
        reached[:] = [False] * size

    # The last failed search leaves ``reached`` holding the source side of the cut.
    labels = [0 if reached[i] else 1 for i in range(m)]
    score = total + c
    if maximize:
        score = -score
    return score, labels