from __future__ import annotations


class TourEngineError(Exception):
    """Base class for errors reported synchronously by the engine."""


class InvalidStrategy(TourEngineError, KeyError):
    """Raised when a run is requested for an unknown strategy name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown strategy: {self.name}"


class InsufficientPoints(TourEngineError, ValueError):
    """Raised when a run is requested on an empty point set."""


class ConcurrentRunRejected(TourEngineError, RuntimeError):
    """Raised when a run is requested while another one is still active."""


__all__ = [
    "ConcurrentRunRejected",
    "InsufficientPoints",
    "InvalidStrategy",
    "TourEngineError",
]
