"""A 2D kd-tree answering nearest-neighbour queries by squared distance."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

Point = tuple[int, int]


def _dist2(a: Point, b: Point) -> int:
    dx, dy = a[0] - b[0], a[1] - b[1]
    return dx * dx + dy * dy


@dataclass
class _Node:
    x0: int
    x1: int
    y0: int
    y1: int
    point: Optional[Point] = None
    first: Optional["_Node"] = None
    second: Optional["_Node"] = None

    def box_distance(self, p: Point) -> int:
        """Squared distance from ``p`` to the bounding box, 0 if inside."""
        dx = self.x0 - p[0] if p[0] < self.x0 else max(p[0] - self.x1, 0)
        dy = self.y0 - p[1] if p[1] < self.y0 else max(p[1] - self.y1, 0)
        return dx * dx + dy * dy


def _build(points: list[Point]) -> _Node:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    node = _Node(min(xs), max(xs), min(ys), max(ys))
    if len(points) == 1:
        node.point = points[0]
        return node
    axis = 0 if node.x1 - node.x0 >= node.y1 - node.y0 else 1
    points.sort(key=lambda p: p[axis])
    half = len(points) // 2
    node.first = _build(points[:half])
    node.second = _build(points[half:])
    return node


class KDTree:
    """Static kd-tree built in O(n log^2 n)."""

    def __init__(self, points: Iterable[Sequence[int]]) -> None:
        pts = [(p[0], p[1]) for p in points]
        if not pts:
            raise ValueError("a kd-tree needs at least one point")
        self._root = _build(pts)

    def nearest(self, point: Sequence[int]) -> int:
        """Return the squared distance from ``point`` to the closest stored point."""
        return self._search(self._root, (point[0], point[1]))

    def _search(self, node: _Node, p: Point) -> int:
        if node.point is not None:
            return _dist2(p, node.point)
        assert node.first is not None and node.second is not None
        near, far = node.first, node.second
        b_near, b_far = near.box_distance(p), far.box_distance(p)
        if not b_near < b_far:
            near, far = far, near
            b_near, b_far = b_far, b_near
        best = self._search(near, p)
        if b_far < best:
            best = min(best, self._search(far, p))
        return best