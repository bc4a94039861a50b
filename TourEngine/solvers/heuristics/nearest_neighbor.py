from __future__ import annotations

from typing import Optional

import numpy as np

from TourEngine.geometry import PointSet, distance, tour_cost
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    Construction,
    StepStream,
    pick_start,
    require_points,
)
from TourEngine.utils.taxonomy import ConstructionFamily


class NearestNeighborStrategy(BaseStrategy):
    name = "nearest-neighbor"
    family = ConstructionFamily.GREEDY
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
        tour = [start]
        remaining = [p for p in points if p is not start]

        while remaining and not token.stopped:
            last = tour[-1]
            # stable: equidistant points keep their current relative order
            remaining.sort(key=lambda p: distance(last, p))
            tour.append(remaining.pop(0))
            yield run.step(tour, tour_cost(tour), closed=False)

        if token.stopped:
            return run.stop(tour, remaining)
        step, result = run.close(tour)
        yield step
        return result


__all__ = ["NearestNeighborStrategy"]
