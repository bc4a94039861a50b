from __future__ import annotations

import math
from typing import Optional

import numpy as np

from TourEngine.geometry import PointSet, cheapest_edge, distance, tour_cost
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    Construction,
    StepStream,
    pick_start,
    require_points,
)
from TourEngine.utils.taxonomy import ConstructionFamily


class FurthestInsertionStrategy(BaseStrategy):
    """Grow the tour from its most isolated remaining point.

    Starts from the first point (or ``start_index`` when given) and the point
    furthest from it. Each iteration selects the remaining point whose
    distance to the tour is largest and inserts it at the cheapest edge.
    """

    name = "furthest-insertion"
    family = ConstructionFamily.INSERTION
    randomized_start = False

    def construct(
        self,
        points: PointSet,
        token: CancellationToken,
        start_index: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> StepStream:
        require_points(points, self.name)
        run = Construction(self.name, points, token)
        first = points[pick_start(len(points), start_index or 0)]
        run.metadata["start"] = first
        tour = [first]
        remaining = [p for p in points if p is not first]

        if remaining:
            # max() keeps the first of several equally distant points
            far = max(range(len(remaining)), key=lambda i: distance(first, remaining[i]))
            tour.append(remaining.pop(far))
            yield run.step(tour, tour_cost(tour), closed=False)

        while remaining and not token.stopped:
            selected = 0
            selected_distance = -math.inf
            for i, free in enumerate(remaining):
                gap = min(distance(free, p) for p in tour)
                if gap > selected_distance:
                    selected_distance = gap
                    selected = i
            point = remaining.pop(selected)
            pos, _ = cheapest_edge(tour, point)
            tour.insert(pos, point)
            yield run.step(tour, tour_cost(tour), closed=False)

        if token.stopped:
            return run.stop(tour, remaining)
        step, result = run.close(tour)
        yield step
        return result


__all__ = ["FurthestInsertionStrategy"]
