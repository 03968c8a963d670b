"""Aggregation helpers for sequences of BigFraction values."""

from __future__ import annotations

from collections.abc import Iterable

from bigfraction.fraction import ZERO, BigFraction

__all__ = ["sum_fractions"]


def sum_fractions(values: Iterable[BigFraction]) -> BigFraction:
    """Sum values in order, starting from ZERO.

    Args:
        values: Fractions to add (an empty iterable sums to ZERO)

    Returns:
        The exact total

    Raises:
        TypeError: If values is None
    """
    if values is None:
        raise TypeError("sum_fractions requires an iterable, got None")
    total = ZERO
    for value in values:
        total += value
    return total
