from __future__ import annotations

import numpy as np
import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from TourEngine import Point

TEST_SEED = 1337

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("ci")


def point_sets(min_size: int = 1, max_size: int = 12, span: int = 50):
    """Hypothesis strategy for point sets with distinct integer coordinates."""
    coords = st.lists(
        st.tuples(st.integers(0, span), st.integers(0, span)),
        min_size=min_size,
        max_size=max_size,
        unique=True,
    )
    return coords.map(lambda pairs: tuple(Point(float(x), float(y)) for x, y in pairs))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(TEST_SEED)


@pytest.fixture
def square_with_center() -> tuple:
    return (
        Point(0.0, 0.0),
        Point(10.0, 0.0),
        Point(10.0, 10.0),
        Point(0.0, 10.0),
        Point(5.0, 2.0),
    )


@pytest.fixture
def scattered_points(rng) -> tuple:
    coords = rng.choice(400, size=12, replace=False)
    return tuple(Point(float(c % 20), float(c // 20)) for c in coords)
