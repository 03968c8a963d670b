"""Pytest configuration and fixtures."""

import random

import pytest

from bigfraction import FractionConfig
from bigfraction.math.powers import PowersOfTen
from tests.helpers import SMALL_MAX_POWER, make_rng


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator, fresh per test."""
    return make_rng()


@pytest.fixture
def small_config() -> FractionConfig:
    """Config with a small power-of-ten ceiling."""
    return FractionConfig(max_power_of_ten=SMALL_MAX_POWER)


@pytest.fixture
def small_powers(small_config: FractionConfig) -> PowersOfTen:
    """Private power-of-ten cache bounded by SMALL_MAX_POWER."""
    return PowersOfTen(small_config)
