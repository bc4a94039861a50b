import math

import pytest

from TourEngine.geometry import Point
from TourEngine.metrics import MetricsTracker, format_large_number, possible_tours
from TourEngine.solvers.base import RunResult, Step


def _result(cost, stopped=False):
    return RunResult(
        name="nearest-neighbor",
        final_tour=(Point(0.0, 0.0),),
        final_cost=cost,
        stopped=stopped,
        elapsed=0.5,
        steps=3,
    )


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 1), (3, 2), (5, 24)])
def test_possible_tours(n, expected):
    assert possible_tours(n) == expected


def test_format_large_number():
    assert format_large_number(24) == "24"
    assert format_large_number(362880) == "362,880"
    assert format_large_number(math.factorial(20)) == "2.43e+18"
    # well past float range
    assert format_large_number(math.factorial(200)).startswith("7.89e+")


def test_tracker_lifecycle():
    tracker = MetricsTracker(5)
    snap = tracker.snapshot()
    assert snap.possible_tours == 24
    assert snap.min_distance == math.inf

    tracker.start()
    tracker.observe(Step(tour=(), cost=12.5, elapsed_seconds=0.25, closed=False, index=0))
    assert tracker.snapshot().current_distance == 12.5
    assert tracker.snapshot().elapsed_seconds == 0.25

    tracker.finish(_result(30.0))
    assert tracker.snapshot().min_distance == 30.0
    tracker.finish(_result(40.0))
    assert tracker.snapshot().min_distance == 30.0
    assert tracker.snapshot().current_distance == 40.0
    tracker.finish(_result(20.0, stopped=True))
    assert tracker.snapshot().min_distance == 30.0

    tracker.start()
    assert tracker.snapshot().current_distance == 0.0
    assert tracker.snapshot().min_distance == 30.0

    tracker.reset(3)
    assert tracker.snapshot().min_distance == math.inf
    assert tracker.snapshot().possible_tours == 2
