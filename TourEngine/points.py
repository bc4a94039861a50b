from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from TourEngine.geometry import Point, PointSet


@dataclass(frozen=True)
class GridBounds:
    """A drawing grid of ``columns`` x ``rows`` cells; points sit on cell corners."""

    columns: int
    rows: int
    cell_width: float
    cell_height: float

    @property
    def width(self) -> float:
        return self.columns * self.cell_width

    @property
    def height(self) -> float:
        return self.rows * self.cell_height


def generate_points(
    count: int,
    bounds: GridBounds,
    margin_cells: int = 1,
    rng: Optional[np.random.Generator] = None,
) -> PointSet:
    """Sample ``count`` distinct grid points, keeping ``margin_cells`` clear on every side."""
    if rng is None:
        rng = np.random.default_rng()
    if count < 0:
        raise ValueError("count must be non-negative")

    cols = bounds.columns - 2 * margin_cells
    rows = bounds.rows - 2 * margin_cells
    if cols <= 0 or rows <= 0:
        raise ValueError(f"Margin of {margin_cells} cells leaves no room on a {bounds.columns}x{bounds.rows} grid.")
    available = cols * rows
    if count > available:
        raise ValueError(f"Cannot place {count} distinct points on {available} free grid cells.")

    cells = rng.choice(available, size=count, replace=False)
    return tuple(
        Point(
            float((margin_cells + int(cell) % cols) * bounds.cell_width),
            float((margin_cells + int(cell) // cols) * bounds.cell_height),
        )
        for cell in cells
    )


__all__ = ["GridBounds", "generate_points"]
