"""Planar computational geometry: points, lines, segments, circles and polygons."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

EPS = 1e-12


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, c: float) -> Point:
        return Point(self.x * c, self.y * c)

    def __truediv__(self, c: float) -> Point:
        return Point(self.x / c, self.y / c)

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"


def dot(p: Point, q: Point) -> float:
    """Dot product."""
    return p.x * q.x + p.y * q.y


def dist2(p: Point, q: Point) -> float:
    """Squared Euclidean distance."""
    return dot(p - q, p - q)


def cross(p: Point, q: Point) -> float:
    """z-component of the cross product."""
    return p.x * q.y - p.y * q.x


def rotate_ccw90(p: Point) -> Point:
    """Rotate 90 degrees counterclockwise about the origin."""
    return Point(-p.y, p.x)


def rotate_cw90(p: Point) -> Point:
    """Rotate 90 degrees clockwise about the origin."""
    return Point(p.y, -p.x)


def rotate_ccw(p: Point, t: float) -> Point:
    """Rotate counterclockwise by ``t`` radians about the origin."""
    return Point(p.x * math.cos(t) - p.y * math.sin(t), p.x * math.sin(t) + p.y * math.cos(t))


def project_point_line(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the line through ``a`` and ``b`` (``a != b``)."""
    return a + (b - a) * dot(c - a, b - a) / dot(b - a, b - a)


def project_point_segment(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the segment from ``a`` to ``b``."""
    r = dot(b - a, b - a)
    if abs(r) < EPS:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def distance_point_segment(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the segment from ``a`` to ``b``."""
    return math.sqrt(dist2(c, project_point_segment(a, b, c)))


def distance_point_plane(
    x: float, y: float, z: float, a: float, b: float, c: float, d: float
) -> float:
    """Distance from point ``(x, y, z)`` to the plane ``ax + by + cz = d``."""
    return abs(a * x + b * y + c * z - d) / math.sqrt(a * a + b * b + c * c)


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ab is parallel (or collinear) to line cd."""
    return abs(cross(b - a, c - d)) < EPS


def lines_collinear(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if lines ab and cd coincide."""
    return (
        lines_parallel(a, b, c, d)
        and abs(cross(a - b, a - c)) < EPS
        and abs(cross(c - d, c - a)) < EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segment ab meets segment cd."""
    if lines_collinear(a, b, c, d):
        if (
            dist2(a, c) < EPS
            or dist2(a, d) < EPS
            or dist2(b, c) < EPS
            or dist2(b, d) < EPS
        ):
            return True
        return not (dot(c - a, c - b) > 0 and dot(d - a, d - b) > 0 and dot(c - b, d - b) > 0)
    if cross(d - a, b - a) * cross(c - a, b - a) > 0:
        return False
    if cross(a - c, d - c) * cross(b - c, d - c) > 0:
        return False
    return True


def compute_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Intersection of line ab with line cd.

    Raises ValueError if either line is degenerate or the lines are parallel.
    """
    b = b - a
    d = c - d
    c = c - a
    if not (dot(b, b) > EPS and dot(d, d) > EPS):
        raise ValueError("a line needs two distinct points")
    denom = cross(b, d)
    if denom == 0:
        raise ValueError("lines are parallel")
    return a + b * cross(c, d) / denom


def compute_circle_center(a: Point, b: Point, c: Point) -> Point:
    """Centre of the circle through three points."""
    b = (a + b) / 2
    c = (a + c) / 2
    return compute_line_intersection(b, b + rotate_cw90(a - b), c, c + rotate_cw90(a - c))


def _edges(p: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    pts = list(p)
    return zip(pts, pts[1:] + pts[:1])


def point_in_polygon(p: Sequence[Point], q: Point) -> bool:
    """Crossing test for a possibly non-convex polygon.

    Strictly interior points give True, strictly exterior points False;
    boundary points may give either.
    """
    inside = False
    for pi, pj in _edges(p):
        if ((pi.y <= q.y < pj.y) or (pj.y <= q.y < pi.y)) and q.x < pi.x + (
            pj.x - pi.x
        ) * (q.y - pi.y) / (pj.y - pi.y):
            inside = not inside
    return inside


def point_on_polygon(p: Sequence[Point], q: Point) -> bool:
    """True if ``q`` lies on the polygon boundary."""
    return any(dist2(project_point_segment(pi, pj, q), q) < EPS for pi, pj in _edges(p))


def circle_line_intersection(a: Point, b: Point, c: Point, r: float) -> list[Point]:
    """Intersections of the line through ``a`` and ``b`` with the circle at ``c``, radius ``r``."""
    b = b - a
    a = a - c
    qa = dot(b, b)
    qb = dot(a, b)
    qc = dot(a, a) - r * r
    disc = qb * qb - qa * qc
    if disc < -EPS:
        return []
    points = [c + a + b * (-qb + math.sqrt(disc + EPS)) / qa]
    if disc > EPS:
        points.append(c + a + b * (-qb - math.sqrt(disc)) / qa)
    return points


def circle_circle_intersection(a: Point, b: Point, r1: float, r2: float) -> list[Point]:
    """Intersections of the circle at ``a`` radius ``r1`` with the circle at ``b`` radius ``r2``."""
    d = math.sqrt(dist2(a, b))
    if d > r1 + r2 or d + min(r1, r2) < max(r1, r2):
        return []
    if d == 0:
        raise ValueError("concentric circles")
    x = (d * d - r2 * r2 + r1 * r1) / (2 * d)
    y = math.sqrt(max(r1 * r1 - x * x, 0.0))
    v = (b - a) / d
    points = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        points.append(a + v * x - rotate_ccw90(v) * y)
    return points


def signed_area(p: Sequence[Point]) -> float:
    """Signed area, positive for counterclockwise vertex order."""
    return sum(pi.x * pj.y - pj.x * pi.y for pi, pj in _edges(p)) / 2.0


def area(p: Sequence[Point]) -> float:
    """Area of a simple polygon."""
    return abs(signed_area(p))


def centroid(p: Sequence[Point]) -> Point:
    """Centre of mass of a simple polygon."""
    scale = 6.0 * signed_area(p)
    c = Point(0.0, 0.0)
    for pi, pj in _edges(p):
        c = c + (pi + pj) * (pi.x * pj.y - pj.x * pi.y)
    return c / scale


def is_simple(p: Sequence[Point]) -> bool:
    """True if no two non-adjacent edges of the polygon meet."""
    pts = list(p)
    n = len(pts)
    for i in range(n):
        j = (i + 1) % n
        for k in range(i + 1, n):
            l = (k + 1) % n
            if i == l or j == k:
                continue
            if segments_intersect(pts[i], pts[j], pts[k], pts[l]):
                return False
    return True