from __future__ import annotations

from typing import Generator, List, Optional

import numpy as np

from TourEngine.geometry import Point, PointSet, cheapest_insertion, closed_tour, tour_cost
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    Construction,
    Step,
    StepStream,
    discard,
    pick_start,
    require_points,
)
from TourEngine.utils.taxonomy import ConstructionFamily


def insert_nearest(
    run: Construction, tour: List[Point], remaining: List[Point]
) -> Generator[Step, None, None]:
    """Grow ``tour`` in place with the cheapest (point, edge) insertion until done or stopped."""
    while remaining and not run.token.stopped:
        point, pos, _ = cheapest_insertion(tour, remaining)
        tour.insert(pos, point)
        discard(remaining, point)
        cycle = closed_tour(tour)
        yield run.step(cycle, tour_cost(cycle), closed=True)


class NearestInsertionStrategy(BaseStrategy):
    name = "nearest-insertion"
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

        yield from insert_nearest(run, tour, remaining)

        if token.stopped:
            return run.stop(tour, remaining)
        step, result = run.close(tour)
        yield step
        return result


__all__ = ["NearestInsertionStrategy", "insert_nearest"]
