from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generator, List, Optional, Sequence, Tuple, Type

import numpy as np

from TourEngine.errors import InsufficientPoints
from TourEngine.geometry import Point, PointSet, Tour, closed_tour, tour_cost
from TourEngine.utils.taxonomy import ConstructionFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """Snapshot of a tour under construction."""

    tour: Tour
    cost: float
    elapsed_seconds: float
    closed: bool
    index: int


@dataclass
class RunResult:
    """Container capturing the outcome of one strategy run."""

    name: str
    final_tour: Tour
    final_cost: float
    stopped: bool
    elapsed: float
    steps: int
    remaining: Tuple[Point, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> str:
        return "stopped" if self.stopped else "complete"


StepObserver = Callable[[Step], None]
StepStream = Generator[Step, None, RunResult]


class CancellationToken:
    """Stop flag shared between the driver of a run and the running strategy.

    Stopping is idempotent. Strategies only read the flag, at the top of each
    construction iteration.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def stop(self) -> None:
        self._event.set()

    @property
    def stopped(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(stopped={self.stopped})"


def current_time() -> float:
    return time.perf_counter()


def require_points(points: PointSet, name: str) -> None:
    if not points:
        raise InsufficientPoints(f"{name} needs at least one point")


def discard(items: List[Point], item: Point) -> None:
    """Remove ``item`` from ``items`` by identity."""
    for i, candidate in enumerate(items):
        if candidate is item:
            del items[i]
            return
    raise ValueError(f"{item!r} is not in the list")


def pick_start(
    n: int, start_index: Optional[int] = None, rng: Optional[np.random.Generator] = None
) -> int:
    if start_index is None:
        if rng is None:
            rng = np.random.default_rng()
        return int(rng.integers(n))
    if not 0 <= start_index < n:
        raise ValueError(f"start_index {start_index} out of range for {n} points")
    return int(start_index)


class Construction:
    """Bookkeeping for one run: step numbering, timing and the final result."""

    def __init__(self, name: str, points: PointSet, token: CancellationToken) -> None:
        self.name = name
        self.points = points
        self.token = token
        self.start_time = current_time()
        self.count = 0
        self.metadata: Dict[str, Any] = {}

    def elapsed(self) -> float:
        return current_time() - self.start_time

    def step(self, tour: Sequence[Point], cost: float, closed: bool) -> Step:
        step = Step(
            tour=tuple(tour),
            cost=float(cost),
            elapsed_seconds=self.elapsed(),
            closed=closed,
            index=self.count,
        )
        self.count += 1
        logger.debug("%s step %d: %d points, cost=%.3f", self.name, step.index, len(step.tour), step.cost)
        return step

    def close(self, tour: Sequence[Point]) -> Tuple[Step, RunResult]:
        final = closed_tour(tour)
        cost = tour_cost(final)
        step = self.step(final, cost, closed=True)
        result = RunResult(
            name=self.name,
            final_tour=final,
            final_cost=cost,
            stopped=False,
            elapsed=step.elapsed_seconds,
            steps=self.count,
            metadata=dict(self.metadata),
        )
        return step, result

    def stop(self, tour: Sequence[Point], remaining: Sequence[Point]) -> RunResult:
        partial = tuple(tour)
        logger.debug("%s stopped with %d points placed, %d remaining", self.name, len(partial), len(remaining))
        return RunResult(
            name=self.name,
            final_tour=partial,
            final_cost=tour_cost(partial),
            stopped=True,
            elapsed=self.elapsed(),
            steps=self.count,
            remaining=tuple(remaining),
            metadata=dict(self.metadata),
        )


@dataclass(frozen=True)
class StrategySpec:
    """Metadata describing a strategy implementation."""

    name: str
    cls: Type["BaseStrategy"]
    family: ConstructionFamily
    randomized_start: bool = True


class BaseStrategy:
    """Common interface for tour construction strategies.

    ``construct`` is a generator yielding one ``Step`` per placement and
    returning the ``RunResult``. ``solve`` drives it to the end.
    """

    name: str
    family: ConstructionFamily
    randomized_start: bool = True

    def construct(
        self,
        points: PointSet,
        token: CancellationToken,
        start_index: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> StepStream:
        raise NotImplementedError

    def solve(
        self,
        points: PointSet,
        token: Optional[CancellationToken] = None,
        observer: Optional[StepObserver] = None,
        tick: Optional[StepObserver] = None,
        start_index: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> RunResult:
        if token is None:
            token = CancellationToken()
        stream = self.construct(points, token, start_index=start_index, rng=rng)
        while True:
            try:
                step = next(stream)
            except StopIteration as done:
                return done.value
            if observer is not None:
                observer(step)
            if tick is not None:
                tick(step)

    def __call__(self, points: PointSet, token: Optional[CancellationToken] = None, **kwargs) -> RunResult:
        return self.solve(points, token, **kwargs)


__all__ = [
    "BaseStrategy",
    "CancellationToken",
    "Construction",
    "ConstructionFamily",
    "RunResult",
    "Step",
    "StepObserver",
    "StepStream",
    "StrategySpec",
    "current_time",
    "discard",
    "pick_start",
    "require_points",
]
