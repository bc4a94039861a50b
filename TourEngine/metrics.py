from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from TourEngine.solvers.base import RunResult, Step


@dataclass(frozen=True)
class Metrics:
    possible_tours: int
    elapsed_seconds: float
    current_distance: float
    min_distance: float


def possible_tours(n: int) -> int:
    """Number of tours through ``n`` points with the start point fixed, ``(n - 1)!``."""
    if n <= 0:
        return 0
    return math.factorial(n - 1)


def format_large_number(value: float) -> str:
    if value > 1e6:
        return format(Decimal(value), ".2e")
    return f"{value:,}"


class MetricsTracker:
    """Running performance figures for the current point set.

    ``min_distance`` only ever decreases while the point set stays the same
    and is cleared by ``reset``. Stopped runs never contribute to it.
    """

    def __init__(self, point_count: int = 0) -> None:
        self.reset(point_count)

    def reset(self, point_count: int) -> None:
        self.possible_tours = possible_tours(point_count)
        self.elapsed_seconds = 0.0
        self.current_distance = 0.0
        self.min_distance = math.inf

    def start(self) -> None:
        self.elapsed_seconds = 0.0
        self.current_distance = 0.0

    def observe(self, step: Step) -> None:
        self.elapsed_seconds = step.elapsed_seconds
        self.current_distance = step.cost

    def finish(self, result: RunResult) -> None:
        self.elapsed_seconds = result.elapsed
        if result.stopped:
            return
        self.current_distance = result.final_cost
        if result.final_cost < self.min_distance:
            self.min_distance = result.final_cost

    def snapshot(self) -> Metrics:
        return Metrics(
            possible_tours=self.possible_tours,
            elapsed_seconds=self.elapsed_seconds,
            current_distance=self.current_distance,
            min_distance=self.min_distance,
        )


__all__ = ["Metrics", "MetricsTracker", "format_large_number", "possible_tours"]
