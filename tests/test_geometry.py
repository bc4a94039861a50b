import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from TourEngine.geometry import (
    Point,
    as_points,
    cheapest_edge,
    cheapest_insertion,
    closed_tour,
    convex_hull,
    distance,
    insertion_cost,
    tour_cost,
)

from .conftest import point_sets


def test_distance_is_euclidean_and_symmetric():
    a, b = Point(0.0, 0.0), Point(3.0, 4.0)
    assert distance(a, b) == 5.0
    assert distance(b, a) == 5.0
    assert distance(a, Point(0.0, 0.0)) == 0.0


@pytest.mark.parametrize("points,expected", [
    ([], 0.0),
    ([Point(1.0, 1.0)], 0.0),
    ([Point(0.0, 0.0), Point(3.0, 4.0)], 5.0),
    ([Point(0.0, 0.0), Point(3.0, 4.0), Point(0.0, 0.0)], 10.0),
])
def test_tour_cost_sums_consecutive_edges(points, expected):
    assert tour_cost(points) == pytest.approx(expected)


def test_closed_tour_repeats_first_point():
    pts = [Point(0.0, 0.0), Point(1.0, 0.0)]
    assert closed_tour(pts) == (pts[0], pts[1], pts[0])
    assert closed_tour([]) == ()


@given(point_sets(min_size=2), st.integers(0, 11))
def test_closed_cost_invariant_under_reversal_and_rotation(points, shift):
    cost = tour_cost(closed_tour(points))
    k = shift % len(points)
    rotated = points[k:] + points[:k]
    assert tour_cost(closed_tour(rotated)) == pytest.approx(cost)
    assert tour_cost(closed_tour(points[::-1])) == pytest.approx(cost)


def test_insertion_cost_zero_on_segment():
    assert insertion_cost(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0)) == 0.0


@given(
    st.tuples(st.integers(0, 50), st.integers(0, 50)),
    st.tuples(st.integers(0, 50), st.integers(0, 50)),
    st.tuples(st.integers(0, 50), st.integers(0, 50)),
)
def test_insertion_cost_sign(a, p, b):
    a, p, b = Point(*map(float, a)), Point(*map(float, p)), Point(*map(float, b))
    cost = insertion_cost(a, p, b)
    on_line = (p.x - a.x) * (b.y - a.y) == (p.y - a.y) * (b.x - a.x)
    between = min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    if on_line and between:
        assert cost == pytest.approx(0.0, abs=1e-9)
    else:
        assert cost > 1e-9


def test_cheapest_edge_includes_wraparound_and_prefers_first():
    tour = [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)]
    # (5, 0) lies on the first edge
    assert cheapest_edge(tour, Point(5.0, 0.0)) == (1, 0.0)
    # (0, 10) is cheapest on the closing edge back to (0, 0)
    pos, _ = cheapest_edge(tour, Point(0.0, 10.0))
    assert pos == 3


def test_cheapest_edge_single_point_tour():
    pos, cost = cheapest_edge([Point(0.0, 0.0)], Point(3.0, 4.0))
    assert pos == 1
    assert cost == pytest.approx(10.0)


def test_cheapest_insertion_scans_points_then_edges():
    tour = [Point(0.0, 0.0), Point(10.0, 0.0)]
    far, near = Point(5.0, 8.0), Point(5.0, 1.0)
    point, pos, cost = cheapest_insertion(tour, [far, near])
    assert point is near
    assert pos == 1
    assert cost == pytest.approx(2 * math.sqrt(26) - 10)


def test_convex_hull_square_with_interior_point(square_with_center):
    hull = convex_hull(square_with_center)
    assert hull == [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]


def test_convex_hull_drops_collinear_boundary_points():
    pts = [Point(0.0, 0.0), Point(5.0, 0.0), Point(10.0, 0.0), Point(5.0, 5.0)]
    assert convex_hull(pts) == [Point(0.0, 0.0), Point(10.0, 0.0), Point(5.0, 5.0)]


@pytest.mark.parametrize("points,expected", [
    ([Point(2.0, 3.0)], [Point(2.0, 3.0)]),
    ([Point(4.0, 0.0), Point(0.0, 0.0)], [Point(0.0, 0.0), Point(4.0, 0.0)]),
    ([Point(1.0, 0.0), Point(2.0, 0.0), Point(0.0, 0.0)], [Point(0.0, 0.0), Point(2.0, 0.0)]),
])
def test_convex_hull_degenerate_inputs(points, expected):
    assert convex_hull(points) == expected


def test_convex_hull_keeps_point_identity(square_with_center):
    hull = convex_hull(square_with_center)
    assert all(any(h is p for p in square_with_center) for h in hull)


def test_as_points_accepts_arrays_and_pairs():
    arr = np.array([[0, 0], [1, 2]])
    assert as_points(arr) == (Point(0.0, 0.0), Point(1.0, 2.0))
    assert as_points([(3, 4)]) == (Point(3.0, 4.0),)
    assert as_points([]) == ()


def test_as_points_keeps_point_objects():
    pts = [Point(0.0, 0.0), Point(1.0, 1.0)]
    out = as_points(pts)
    assert out[0] is pts[0] and out[1] is pts[1]


def test_as_points_rejects_bad_shape():
    with pytest.raises(ValueError):
        as_points([(1.0, 2.0, 3.0)])
