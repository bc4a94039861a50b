from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    x: float
    y: float


PointSet = Tuple[Point, ...]
Tour = Tuple[Point, ...]


def as_points(points: Iterable[Sequence[float]] | np.ndarray) -> PointSet:
    """Coerce ``Point`` objects, ``(x, y)`` pairs or an ``(n, 2)`` array into a point set.

    Existing ``Point`` instances are kept as-is so identity-based bookkeeping
    in the strategies still refers to the caller's objects.
    """
    items = list(points)
    if all(isinstance(p, Point) for p in items):
        return tuple(items)
    coords = np.asarray(items, dtype=float)
    if coords.size == 0:
        return ()
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of coordinates, got shape {coords.shape}.")
    return tuple(Point(float(x), float(y)) for x, y in coords)


def distance(a: Point, b: Point) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def tour_cost(points: Sequence[Point]) -> float:
    """Sum of edge lengths between consecutive points (no implicit return leg)."""
    cost = 0.0
    for i in range(len(points) - 1):
        cost += distance(points[i], points[i + 1])
    return cost


def closed_tour(points: Sequence[Point]) -> Tour:
    tour = tuple(points)
    if not tour:
        return tour
    return tour + (tour[0],)


def insertion_cost(p_i: Point, point: Point, p_j: Point) -> float:
    """Marginal cost of visiting ``point`` between adjacent tour points ``p_i`` and ``p_j``."""
    return distance(p_i, point) + distance(point, p_j) - distance(p_i, p_j)


def cheapest_edge(tour: Sequence[Point], point: Point) -> Tuple[int, float]:
    """Return ``(position, cost)`` of the first cheapest edge to insert ``point`` into.

    ``position`` is the list index the point should be inserted at. The
    wrap-around edge from the last point back to the first is included; for a
    one-point tour it has zero length.
    """
    best_pos = 0
    best_cost = math.inf
    n = len(tour)
    for i in range(n):
        cost = insertion_cost(tour[i], point, tour[(i + 1) % n])
        if cost < best_cost:
            best_cost = cost
            best_pos = i + 1
    return best_pos, best_cost


def cheapest_insertion(
    tour: Sequence[Point], candidates: Sequence[Point]
) -> Tuple[Optional[Point], int, float]:
    """Scan candidates x tour edges and return the first minimal ``(point, position, cost)``."""
    best_point: Optional[Point] = None
    best_pos = 0
    best_cost = math.inf
    n = len(tour)
    for point in candidates:
        for i in range(n):
            cost = insertion_cost(tour[i], point, tour[(i + 1) % n])
            if cost < best_cost:
                best_cost = cost
                best_point = point
                best_pos = i + 1
    return best_point, best_pos, best_cost


def cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(points: Sequence[Point]) -> List[Point]:
    """Monotone-chain convex hull in counter-clockwise order.

    Collinear boundary points are dropped (``cross <= 0`` pops). With a single
    input point the hull is that point; fully collinear input collapses to its
    two extreme points.
    """
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    if len(ordered) <= 1:
        return ordered

    lower: List[Point] = []
    for p in ordered:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Point] = []
    for p in reversed(ordered):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


__all__ = [
    "Point",
    "PointSet",
    "Tour",
    "as_points",
    "cheapest_edge",
    "cheapest_insertion",
    "closed_tour",
    "convex_hull",
    "cross",
    "distance",
    "insertion_cost",
    "tour_cost",
]
