"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Integer bounds, cache ceilings and seeds
- cases: String tables shared by parsing and formatting tests
- factories: Seeded random values and the f() parse shorthand
"""

from tests.helpers.cases import (
    INVALID_STRINGS,
    NUMERATOR_DENOMINATOR_CASES,
    VALID_MINIMAL_STRINGS,
)
from tests.helpers.constants import (
    DEFAULT_SEED,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    RANDOM_ROUNDS,
    SMALL_MAX_POWER,
)
from tests.helpers.factories import (
    f,
    make_rng,
    random_fraction,
    random_fraction_text,
    random_int32,
    random_int64,
)

__all__ = [
    # Constants
    "DEFAULT_SEED",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "RANDOM_ROUNDS",
    "SMALL_MAX_POWER",
    # Cases
    "INVALID_STRINGS",
    "VALID_MINIMAL_STRINGS",
    "NUMERATOR_DENOMINATOR_CASES",
    # Factories
    "f",
    "make_rng",
    "random_int32",
    "random_int64",
    "random_fraction_text",
    "random_fraction",
]
