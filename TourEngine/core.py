from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from TourEngine.config import EngineConfig
from TourEngine.errors import ConcurrentRunRejected, InsufficientPoints, InvalidStrategy
from TourEngine.geometry import PointSet, as_points
from TourEngine.metrics import Metrics, MetricsTracker
from TourEngine.points import generate_points
from TourEngine.solvers import get_strategy
from TourEngine.solvers.base import CancellationToken, RunResult, Step, StepObserver, StepStream

logger = logging.getLogger(__name__)


class TourRun:
    """One strategy run owned by a ``TourEngine``.

    Iterating yields each ``Step`` as the strategy produces it. Once the
    stream is exhausted ``result`` holds the ``RunResult``.
    """

    def __init__(
        self,
        engine: "TourEngine",
        strategy_name: str,
        stream: StepStream,
        token: CancellationToken,
        observer: Optional[StepObserver] = None,
    ) -> None:
        self.engine = engine
        self.strategy_name = strategy_name
        self.token = token
        self.observer = observer
        self.result: Optional[RunResult] = None
        self._stream = stream

    @property
    def done(self) -> bool:
        return self.result is not None

    @property
    def active(self) -> bool:
        return not self.done and not self.token.stopped

    def stop(self) -> None:
        self.token.stop()

    def __iter__(self) -> Iterator[Step]:
        return self

    def __next__(self) -> Step:
        if self.result is not None:
            raise StopIteration
        try:
            step = next(self._stream)
        except StopIteration as done:
            self.result = done.value
            self.engine._finish(self)
            raise StopIteration from None
        self.engine._observe(self, step)
        if self.observer is not None:
            self.observer(step)
        if self.engine.config.tick is not None:
            self.engine.config.tick(step)
        return step

    def wait(self) -> RunResult:
        """Drain the remaining steps and return the result."""
        for _ in self:
            pass
        return self.result


class TourEngine:
    """Run controller: owns the point set, the metrics and at most one active run."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[np.random.Generator] = None,
        points: Optional[Iterable[Sequence[float]]] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._points: PointSet = ()
        self._active: Optional[TourRun] = None
        self._tracker = MetricsTracker(0)
        if points is not None:
            self.set_points(points)

    @property
    def points(self) -> PointSet:
        return self._points

    @property
    def metrics(self) -> Metrics:
        return self._tracker.snapshot()

    @property
    def active_run(self) -> Optional[TourRun]:
        return self._active

    @property
    def running(self) -> bool:
        return self._active is not None and self._active.active

    def set_points(self, points: Iterable[Sequence[float]]) -> PointSet:
        """Replace the point set, stopping any active run and resetting the metrics."""
        if self.running:
            logger.info("point set changed; stopping active %s run", self._active.strategy_name)
        self.stop()
        self._active = None
        self._points = as_points(points)
        self._tracker.reset(len(self._points))
        logger.debug("point set replaced with %d points", len(self._points))
        return self._points

    def randomize(self, count: Optional[int] = None) -> PointSet:
        if count is None:
            count = self.config.point_count
        points = generate_points(count, self.config.bounds, self.config.margin_cells, rng=self.rng)
        return self.set_points(points)

    def clear(self) -> PointSet:
        return self.set_points(())

    def run(
        self,
        strategy_name: Optional[str] = None,
        points: Optional[Iterable[Sequence[float]]] = None,
        start_index: Optional[int] = None,
        observer: Optional[StepObserver] = None,
    ) -> TourRun:
        name = strategy_name or self.config.default_strategy
        try:
            strategy = get_strategy(name)
        except InvalidStrategy:
            logger.warning("rejected run: unknown strategy %r", name)
            raise
        if self.running:
            logger.warning("rejected %s run: %s is still active", name, self._active.strategy_name)
            raise ConcurrentRunRejected(
                f"Cannot start {name}: a {self._active.strategy_name} run is still active; stop it first."
            )
        if points is not None:
            self.set_points(points)
        if not self._points:
            logger.warning("rejected %s run: no points", name)
            raise InsufficientPoints(f"Cannot start {name} on an empty point set.")
        if start_index is not None and not 0 <= start_index < len(self._points):
            raise ValueError(f"start_index {start_index} out of range for {len(self._points)} points")

        token = CancellationToken()
        stream = strategy.construct(self._points, token, start_index=start_index, rng=self.rng)
        run = TourRun(self, strategy.name, stream, token, observer=observer)
        self._active = run
        self._tracker.start()
        logger.info("starting %s on %d points", strategy.name, len(self._points))
        return run

    def solve(self, strategy_name: Optional[str] = None, **kwargs) -> RunResult:
        return self.run(strategy_name, **kwargs).wait()

    def stop(self) -> None:
        """Stop the active run. A no-op when nothing is running."""
        if self._active is not None:
            self._active.stop()

    def reset(self) -> None:
        """Stop and forget the active run, keeping the point set and best distance."""
        self.stop()
        self._active = None
        self._tracker.start()

    def _observe(self, run: TourRun, step: Step) -> None:
        if run is self._active:
            self._tracker.observe(step)

    def _finish(self, run: TourRun) -> None:
        result = run.result
        if run is self._active:
            self._tracker.finish(result)
        logger.info(
            "%s %s after %d steps: cost=%.3f elapsed=%.3fs",
            result.name,
            result.status,
            result.steps,
            result.final_cost,
            result.elapsed,
        )


__all__ = ["TourEngine", "TourRun"]
