from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from TourEngine.points import GridBounds
from TourEngine.solvers.base import Step

TickHook = Callable[[Step], None]


@dataclass(frozen=True)
class EngineConfig:
    """Settings for a ``TourEngine`` and the point sets it generates."""

    default_strategy: str = "nearest-neighbor"
    point_count: int = 20

    # 40 x 40 grid of 20 x 15 cells, matching an 800 x 600 canvas
    grid_columns: int = 40
    grid_rows: int = 40
    cell_width: float = 20.0
    cell_height: float = 15.0
    margin_cells: int = 1

    seed: Optional[int] = None
    # called after every step; used by drivers to pace or yield to a UI loop
    tick: Optional[TickHook] = None

    @property
    def bounds(self) -> GridBounds:
        return GridBounds(
            columns=self.grid_columns,
            rows=self.grid_rows,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
        )

    def with_overrides(self, **overrides) -> "EngineConfig":
        return replace(self, **overrides)


__all__ = ["EngineConfig", "TickHook"]
