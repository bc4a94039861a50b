from TourEngine.config import EngineConfig
from TourEngine.core import TourEngine, TourRun
from TourEngine.errors import ConcurrentRunRejected, InsufficientPoints, InvalidStrategy, TourEngineError
from TourEngine.geometry import (
    Point,
    as_points,
    closed_tour,
    convex_hull,
    distance,
    insertion_cost,
    tour_cost,
)
from TourEngine.metrics import Metrics, MetricsTracker, format_large_number, possible_tours
from TourEngine.points import GridBounds, generate_points
from TourEngine.solvers import (
    STRATEGY_FAMILIES,
    STRATEGY_REGISTRY,
    STRATEGY_SPECS,
    BaseStrategy,
    CancellationToken,
    RunResult,
    Step,
    get_strategy,
)
from TourEngine.utils.taxonomy import ConstructionFamily

__all__ = [
    "BaseStrategy",
    "CancellationToken",
    "ConcurrentRunRejected",
    "ConstructionFamily",
    "EngineConfig",
    "GridBounds",
    "InsufficientPoints",
    "InvalidStrategy",
    "Metrics",
    "MetricsTracker",
    "Point",
    "RunResult",
    "STRATEGY_FAMILIES",
    "STRATEGY_REGISTRY",
    "STRATEGY_SPECS",
    "Step",
    "TourEngine",
    "TourEngineError",
    "TourRun",
    "as_points",
    "closed_tour",
    "convex_hull",
    "distance",
    "format_large_number",
    "generate_points",
    "get_strategy",
    "insertion_cost",
    "possible_tours",
    "tour_cost",
]
