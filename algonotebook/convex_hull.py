"""2D convex hull by the monotone chain algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EPS = 1e-7

Point = tuple[float, float]


def _cross(p: Point, q: Point) -> float:
    return p[0] * q[1] - p[1] * q[0]


def _area2(a: Point, b: Point, c: Point) -> float:
    return _cross(a, b) + _cross(b, c) + _cross(c, a)


def _between(a: Point, b: Point, c: Point) -> bool:
    return (
        abs(_area2(a, b, c)) < EPS
        and (a[0] - b[0]) * (c[0] - b[0]) <= 0
        and (a[1] - b[1]) * (c[1] - b[1]) <= 0
    )


def convex_hull(points: Iterable[Sequence[float]], remove_redundant: bool = True) -> list[Point]:
    """Return the hull counterclockwise, starting at the bottommost-leftmost point.

    Duplicate points are dropped. With ``remove_redundant`` set, points lying
    on a hull edge within a small tolerance are removed as well.
    """
    pts = sorted({(p[0], p[1]) for p in points}, key=lambda p: (p[1], p[0]))
    up: list[Point] = []
    dn: list[Point] = []
    for p in pts:
        while len(up) > 1 and _area2(up[-2], up[-1], p) >= 0:
            up.pop()
        while len(dn) > 1 and _area2(dn[-2], dn[-1], p) <= 0:
            dn.pop()
        up.append(p)
        dn.append(p)
    hull = dn + up[-2:0:-1]

    if not remove_redundant or len(hull) <= 2:
        return hull

    kept = hull[:2]
    for p in hull[2:]:
        if _between(kept[-2], kept[-1], p):
            kept.pop()
        kept.append(p)
    if len(kept) >= 3 and _between(kept[-1], kept[0], kept[1]):
        kept[0] = kept.pop()
    return kept