from TourEngine.solvers.heuristics.arbitrary_insertion import ArbitraryInsertionStrategy
from TourEngine.solvers.heuristics.convex_hull import ConvexHullStrategy
from TourEngine.solvers.heuristics.furthest_insertion import FurthestInsertionStrategy
from TourEngine.solvers.heuristics.nearest_insertion import NearestInsertionStrategy
from TourEngine.solvers.heuristics.nearest_neighbor import NearestNeighborStrategy

__all__ = [
    "ArbitraryInsertionStrategy",
    "ConvexHullStrategy",
    "FurthestInsertionStrategy",
    "NearestInsertionStrategy",
    "NearestNeighborStrategy",
]
