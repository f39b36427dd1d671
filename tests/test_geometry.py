import math

import pytest

from algonotebook.geometry import (
    Point,
    area,
    centroid,
    circle_circle_intersection,
    circle_line_intersection,
    compute_circle_center,
    compute_line_intersection,
    cross,
    dist2,
    distance_point_plane,
    distance_point_segment,
    dot,
    is_simple,
    lines_collinear,
    lines_parallel,
    point_in_polygon,
    point_on_polygon,
    project_point_line,
    project_point_segment,
    rotate_ccw,
    rotate_ccw90,
    rotate_cw90,
    segments_intersect,
    signed_area,
)

P = Point
SQUARE = [P(0, 0), P(5, 0), P(5, 5), P(0, 5)]


def xy(p):
    return (p.x, p.y)


def sorted_xy(points):
    return sorted((round(p.x, 6), round(p.y, 6)) for p in points)


def test_rotations():
    assert xy(rotate_ccw90(P(2, 5))) == (-5, 2)
    assert xy(rotate_cw90(P(2, 5))) == (5, -2)
    assert xy(rotate_ccw(P(2, 5), math.pi / 2)) == pytest.approx((-5, 2))


def test_point_arithmetic_and_products():
    assert P(1, 2) + P(3, 4) == P(4, 6)
    assert P(3, 4) - P(1, 2) == P(2, 2)
    assert dot(P(1, 2), P(3, 4)) == 1 * 3 + 2 * 4
    assert cross(P(1, 2), P(3, 4)) == 1 * 4 - 2 * 3
    assert dist2(P(0, 0), P(3, 4)) == 3 * 3 + 4 * 4


def test_projections():
    assert xy(project_point_line(P(-5, -2), P(10, 4), P(3, 7))) == pytest.approx((5, 2))
    assert xy(project_point_segment(P(-5, -2), P(10, 4), P(3, 7))) == pytest.approx((5, 2))
    assert xy(project_point_segment(P(7.5, 3), P(10, 4), P(3, 7))) == pytest.approx((7.5, 3))
    assert xy(project_point_segment(P(-5, -2), P(2.5, 1), P(3, 7))) == pytest.approx((2.5, 1))


def test_distance_point_segment_matches_projection():
    a, b, c = P(-5, -2), P(2.5, 1), P(3, 7)
    proj = project_point_segment(a, b, c)
    assert distance_point_segment(a, b, c) == pytest.approx(math.sqrt(dist2(c, proj)))


def test_distance_point_plane():
    assert distance_point_plane(4, -4, 3, 2, -2, 5, -8) == pytest.approx(6.78903, rel=1e-5)


def test_parallel_and_collinear():
    assert [
        lines_parallel(P(1, 1), P(3, 5), P(2, 1), P(4, 5)),
        lines_parallel(P(1, 1), P(3, 5), P(2, 0), P(4, 5)),
        lines_parallel(P(1, 1), P(3, 5), P(5, 9), P(7, 13)),
    ] == [True, False, True]
    assert [
        lines_collinear(P(1, 1), P(3, 5), P(2, 1), P(4, 5)),
        lines_collinear(P(1, 1), P(3, 5), P(2, 0), P(4, 5)),
        lines_collinear(P(1, 1), P(3, 5), P(5, 9), P(7, 13)),
    ] == [False, False, True]


def test_segments_intersect():
    assert [
        segments_intersect(P(0, 0), P(2, 4), P(3, 1), P(-1, 3)),
        segments_intersect(P(0, 0), P(2, 4), P(4, 3), P(0, 5)),
        segments_intersect(P(0, 0), P(2, 4), P(2, -1), P(-2, 1)),
        segments_intersect(P(0, 0), P(2, 4), P(5, 5), P(1, 7)),
    ] == [True, True, True, False]


def test_line_intersection_and_circle_center():
    assert xy(compute_line_intersection(P(0, 0), P(2, 4), P(3, 1), P(-1, 3))) == pytest.approx((1, 2))
    assert xy(compute_circle_center(P(-3, 4), P(6, 1), P(4, 5))) == pytest.approx((1, 1))


def test_line_intersection_degenerate_raises():
    with pytest.raises(ValueError):
        compute_line_intersection(P(1, 1), P(1, 1), P(3, 1), P(-1, 3))
    with pytest.raises(ValueError):
        compute_line_intersection(P(0, 0), P(1, 1), P(0, 1), P(1, 2))


def test_point_in_polygon():
    queries = [P(2, 2), P(2, 0), P(0, 2), P(5, 2), P(2, 5)]
    assert [point_in_polygon(SQUARE, q) for q in queries] == [True, True, True, False, False]


def test_point_on_polygon():
    queries = [P(2, 2), P(2, 0), P(0, 2), P(5, 2), P(2, 5)]
    assert [point_on_polygon(SQUARE, q) for q in queries] == [False, True, True, True, True]


def test_circle_line_intersection():
    tangent = circle_line_intersection(P(0, 6), P(2, 6), P(1, 1), 5)
    assert len(tangent) == 1
    assert xy(tangent[0]) == pytest.approx((1, 6), abs=1e-5)
    two = circle_line_intersection(P(0, 9), P(9, 0), P(1, 1), 5)
    assert sorted_xy(two) == [(4, 5), (5, 4)]
    for p in two:
        assert dist2(p, P(1, 1)) == pytest.approx(25)


def test_circle_circle_intersection():
    assert circle_circle_intersection(P(1, 1), P(10, 10), 5, 5) == []
    assert sorted_xy(circle_circle_intersection(P(1, 1), P(8, 8), 5, 5)) == [(4, 5), (5, 4)]
    assert circle_circle_intersection(P(1, 1), P(4.5, 4.5), 10, math.sqrt(2.0) / 2.0) == []
    inner = circle_circle_intersection(P(1, 1), P(4.5, 4.5), 5, math.sqrt(2.0) / 2.0)
    assert sorted_xy(inner) == [(4, 5), (5, 4)]


def test_area_and_centroid():
    poly = [P(0, 0), P(5, 0), P(1, 1), P(0, 5)]
    assert area(poly) == pytest.approx(5.0)
    assert xy(centroid(poly)) == pytest.approx((1.1666666, 1.1666666))


def test_signed_area_orientation():
    assert signed_area(SQUARE) == pytest.approx(area(SQUARE))
    assert signed_area(list(reversed(SQUARE))) == pytest.approx(-area(SQUARE))


def test_is_simple():
    assert is_simple(SQUARE) is True
    bowtie = [P(0, 0), P(2, 2), P(2, 0), P(0, 2)]
    assert is_simple(bowtie) is False


def test_point_str():
    assert str(rotate_ccw90(P(2, 5))) == "(-5,2)"