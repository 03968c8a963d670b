"""Factory functions for creating test values.

Every random factory takes an explicit random.Random so failures reproduce.

Usage:
    rng = make_rng()
    value = random_fraction(rng)
    half = f("0.5")
"""

import random

from bigfraction import BigFraction
from tests.helpers.constants import (
    DEFAULT_SEED,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)


def f(text: str) -> BigFraction:
    """Shorthand for BigFraction.parse in test tables."""
    return BigFraction.parse(text)


def make_rng(seed: int = DEFAULT_SEED) -> random.Random:
    """Return a deterministic random generator."""
    return random.Random(seed)


def random_int64(rng: random.Random) -> int:
    """Uniform signed 64-bit integer."""
    return rng.randint(INT64_MIN, INT64_MAX)


def random_int32(rng: random.Random) -> int:
    """Uniform signed 32-bit integer."""
    return rng.randint(INT32_MIN, INT32_MAX)


def random_fraction_text(
    rng: random.Random,
    max_whole_digits: int = 12,
    max_decimal_digits: int = 12,
) -> str:
    """Random canonical decimal text (may be zero or a whole number)."""
    whole_digits = rng.randint(0, max_whole_digits)
    decimal_digits = rng.randint(0, max_decimal_digits)

    whole = "".join(rng.choice("0123456789") for _ in range(whole_digits)).lstrip("0") or "0"
    decimals = "".join(rng.choice("0123456789") for _ in range(decimal_digits)).rstrip("0")

    text = f"{whole}.{decimals}" if decimals else whole
    if text == "0":
        return text
    return "-" + text if rng.random() < 0.5 else text


def random_fraction(rng: random.Random, **kwargs: int) -> BigFraction:
    """Random BigFraction built from random_fraction_text."""
    return BigFraction.parse(random_fraction_text(rng, **kwargs))
