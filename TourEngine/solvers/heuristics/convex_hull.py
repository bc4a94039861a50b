from __future__ import annotations

from typing import Optional

import numpy as np

from TourEngine.geometry import PointSet, closed_tour, convex_hull, tour_cost
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    Construction,
    StepStream,
    require_points,
)
from TourEngine.solvers.heuristics.nearest_insertion import insert_nearest
from TourEngine.utils.taxonomy import ConstructionFamily


class ConvexHullStrategy(BaseStrategy):
    """Start from the convex hull, then fill in the interior by nearest insertion."""

    name = "convex-hull"
    family = ConstructionFamily.HULL
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
        tour = convex_hull(points)
        run.metadata["hull_size"] = len(tour)
        on_hull = {id(p) for p in tour}
        remaining = [p for p in points if id(p) not in on_hull]

        cycle = closed_tour(tour)
        yield run.step(cycle, tour_cost(cycle), closed=True)

        yield from insert_nearest(run, tour, remaining)

        if token.stopped:
            return run.stop(tour, remaining)
        step, result = run.close(tour)
        yield step
        return result


__all__ = ["ConvexHullStrategy"]
