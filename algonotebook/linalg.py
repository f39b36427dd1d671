"""Gauss-Jordan elimination: inverses, linear systems, determinants and rank."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-10

Matrix = list[list[float]]


class SingularMatrixError(ValueError):
    """Raised when a matrix has no inverse."""


def _copy(a: Sequence[Sequence[float]]) -> Matrix:
    return [[float(v) for v in row] for row in a]


def gauss_jordan(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> tuple[float, Matrix, Matrix]:
    """Solve ``A X = B`` by Gauss-Jordan elimination with full pivoting.

    ``a`` is n x n and ``b`` is n x m. Returns ``(determinant, inverse, X)``;
    the inputs are left untouched. Raises SingularMatrixError when ``a`` is
    singular.
    """
    a = _copy(a)
    b = _copy(b)
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("coefficient matrix must be square")
    if len(b) != n:
        raise ValueError("right-hand side must have as many rows as the matrix")
    m = len(b[0]) if b else 0

    pivoted = [False] * n
    swaps: list[tuple[int, int]] = []
    det = 1.0

    for _ in range(n):
        free = [j for j in range(n) if not pivoted[j]]
        pj, pk = max(
            ((j, k) for j in free for k in free),
            key=lambda jk: abs(a[jk[0]][jk[1]]),
        )
        if abs(a[pj][pk]) < EPS:
            raise SingularMatrixError("matrix is singular")
        pivoted[pk] = True
        a[pj], a[pk] = a[pk], a[pj]
        b[pj], b[pk] = b[pk], b[pj]
        if pj != pk:
            det = -det
        swaps.append((pj, pk))

        pivot = a[pk][pk]
        det *= pivot
        c = 1.0 / pivot
        a[pk][pk] = 1.0
        a[pk] = [v * c for v in a[pk]]
        b[pk] = [v * c for v in b[pk]]
        for p in range(n):
            if p == pk:
                continue
            factor = a[p][pk]
            a[p][pk] = 0.0
            a[p] = [x - y * factor for x, y in zip(a[p], a[pk])]
            b[p] = [x - y * factor for x, y in zip(b[p], b[pk])]

    for r, c in reversed(swaps):
        if r != c:
            for row in a:
                row[r], row[c] = row[c], row[r]

    return det, a, b[:] if m else [[] for _ in range(n)]


def rref(a: Sequence[Sequence[float]]) -> tuple[int, Matrix]:
    """Reduce a matrix to row echelon form with partial pivoting.

    Returns ``(rank, reduced)``; the input is left untouched.
    """
    a = _copy(a)
    n = len(a)
    m = len(a[0]) if a else 0
    r = 0
    for c in range(m):
        if r >= n:
            break
        j = max(range(r, n), key=lambda i: abs(a[i][c]))
        if abs(a[j][c]) < EPS:
            continue
        a[j], a[r] = a[r], a[j]
        s = 1.0 / a[r][c]
        a[r] = [v * s for v in a[r]]
        for i in range(n):
            if i != r:
                t = a[i][c]
                a[i] = [x - t * y for x, y in zip(a[i], a[r])]
        r += 1
    return r, a