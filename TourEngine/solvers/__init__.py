from __future__ import annotations

from TourEngine.errors import InvalidStrategy
from TourEngine.solvers.base import (
    BaseStrategy,
    CancellationToken,
    RunResult,
    Step,
    StrategySpec,
)
from TourEngine.solvers.heuristics import (
    ArbitraryInsertionStrategy,
    ConvexHullStrategy,
    FurthestInsertionStrategy,
    NearestInsertionStrategy,
    NearestNeighborStrategy,
)
from TourEngine.utils.taxonomy import ConstructionFamily

STRATEGY_SPECS: dict[str, StrategySpec] = {
    NearestNeighborStrategy.name: StrategySpec(
        name=NearestNeighborStrategy.name,
        cls=NearestNeighborStrategy,
        family=NearestNeighborStrategy.family,
        randomized_start=NearestNeighborStrategy.randomized_start,
    ),
    ArbitraryInsertionStrategy.name: StrategySpec(
        name=ArbitraryInsertionStrategy.name,
        cls=ArbitraryInsertionStrategy,
        family=ArbitraryInsertionStrategy.family,
        randomized_start=ArbitraryInsertionStrategy.randomized_start,
    ),
    NearestInsertionStrategy.name: StrategySpec(
        name=NearestInsertionStrategy.name,
        cls=NearestInsertionStrategy,
        family=NearestInsertionStrategy.family,
        randomized_start=NearestInsertionStrategy.randomized_start,
    ),
    FurthestInsertionStrategy.name: StrategySpec(
        name=FurthestInsertionStrategy.name,
        cls=FurthestInsertionStrategy,
        family=FurthestInsertionStrategy.family,
        randomized_start=FurthestInsertionStrategy.randomized_start,
    ),
    ConvexHullStrategy.name: StrategySpec(
        name=ConvexHullStrategy.name,
        cls=ConvexHullStrategy,
        family=ConvexHullStrategy.family,
        randomized_start=ConvexHullStrategy.randomized_start,
    ),
}

STRATEGY_REGISTRY: dict[str, type[BaseStrategy]] = {name: spec.cls for name, spec in STRATEGY_SPECS.items()}
STRATEGY_FAMILIES: dict[str, ConstructionFamily] = {name: spec.family for name, spec in STRATEGY_SPECS.items()}


def get_strategy(name: str) -> BaseStrategy:
    strategy_cls = STRATEGY_REGISTRY.get(name)
    if strategy_cls is None:
        raise InvalidStrategy(name)
    return strategy_cls()


__all__ = [
    "BaseStrategy",
    "CancellationToken",
    "ConstructionFamily",
    "RunResult",
    "STRATEGY_FAMILIES",
    "STRATEGY_REGISTRY",
    "STRATEGY_SPECS",
    "Step",
    "StrategySpec",
    "get_strategy",
    "ArbitraryInsertionStrategy",
    "ConvexHullStrategy",
    "FurthestInsertionStrategy",
    "NearestInsertionStrategy",
    "NearestNeighborStrategy",
]
