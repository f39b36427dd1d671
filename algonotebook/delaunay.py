"""Simple O(n^4) Delaunay triangulation via the lifting map."""

from __future__ import annotations

from collections.abc import Sequence


def delaunay_triangulation(
    x: Sequence[float], y: Sequence[float]
) -> list[tuple[int, int, int]]:
    """Return triangles as index triples into the coordinate lists.

    Degenerate inputs (cocircular or collinear points) are not handled.
    """
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    n = len(x)
    z = [xi * xi + yi * yi for xi, yi in zip(x, y)]
    triangles = []
    for i in range(n - 2):
        for j in range(i + 1, n):
            for k in range(i + 1, n):
                if j == k:
                    continue
                xn = (y[j] - y[i]) * (z[k] - z[i]) - (y[k] - y[i]) * (z[j] - z[i])
                yn = (x[k] - x[i]) * (z[j] - z[i]) - (x[j] - x[i]) * (z[k] - z[i])
                zn = (x[j] - x[i]) * (y[k] - y[i]) - (x[k] - x[i]) * (y[j] - y[i])
                if zn < 0 and all(
                    (xm - x[i]) * xn + (ym - y[i]) * yn + (zm - z[i]) * zn <= 0
                    for xm, ym, zm in zip(x, y, z)
                ):
                    triangles.append((i, j, k))
    return triangles