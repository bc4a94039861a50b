from __future__ import annotations

import math
from typing import Optional

import numpy as np

from TourEngine.geometry import PointSet, closed_tour, tour_cost
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    Construction,
    StepStream,
    pick_start,
    require_points,
)
from TourEngine.utils.taxonomy import ConstructionFamily


class ArbitraryInsertionStrategy(BaseStrategy):
    """Insert points in their given order, each at the gap giving the shortest closed tour.

    Every candidate gap is scored by recomputing the whole closed tour cost
    rather than with the incremental insertion formula, so reported costs
    match a full re-evaluation exactly.
    """

    name = "arbitrary-insertion"
    family = ConstructionFamily.INSERTION
    randomized_start = True

    def construct(
        self,
        points: PointSet,
        token: CancellationToken,
        start_index: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> StepStream:
        require_points(points, self.name)
        run = Construction(self.name, points, token)
        start = points[pick_start(len(points), start_index, rng)]
        run.metadata["start"] = start
        tour = [start] + [p for p in points if p is not start][:1]
        remaining = [p for p in points if not any(p is q for q in tour)]

        while remaining and not token.stopped:
            point = remaining.pop(0)
            best_pos = 0
            best_cost = math.inf
            for i in range(len(tour) + 1):
                cost = tour_cost(closed_tour(tour[:i] + [point] + tour[i:]))
                if cost < best_cost:
                    best_cost = cost
                    best_pos = i
            tour.insert(best_pos, point)
            yield run.step(closed_tour(tour), best_cost, closed=True)

        if token.stopped:
            return run.stop(tour, remaining)
        step, result = run.close(tour)
        yield step
        return result


__all__ = ["ArbitraryInsertionStrategy"]
