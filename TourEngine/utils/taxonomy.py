from __future__ import annotations

from enum import Enum


class ConstructionFamily(str, Enum):
    GREEDY = "greedy"
    INSERTION = "insertion"
    HULL = "hull"


__all__ = ["ConstructionFamily"]
