"""Shared cache of powers of ten.

Index ``i`` of the cache holds ``10**i``. The cache starts as ``(1,)`` and only
ever grows. Each published state is an immutable tuple, so readers take a
snapshot reference and index it without locking.

Growth is copy-on-write: a writer extends a private copy of the snapshot it
read and publishes it with a compare-and-swap. If another writer published
first, the extension is discarded and the lookup restarts against the newer
snapshot. The publish lock covers only the identity check and the assignment.
"""

from __future__ import annotations

import threading

import structlog

from bigfraction.config import DEFAULT_FRACTION_CONFIG, FractionConfig
from bigfraction.errors import PowerOutOfRangeError

__all__ = [
    "PowersOfTen",
    "POWERS_OF_TEN",
    "get_power_of_ten",
]

logger = structlog.get_logger()


class PowersOfTen:
    """Append-only cache of ``10**i`` bounded by a fixed ceiling.

    Attributes:
        max_power: Largest power this cache will produce
    """

    __slots__ = ("_config", "_powers", "_publish_lock")

    def __init__(self, config: FractionConfig | None = None) -> None:
        self._config = config or DEFAULT_FRACTION_CONFIG
        self._powers: tuple[int, ...] = (1,)
        self._publish_lock = threading.Lock()

    @property
    def max_power(self) -> int:
        return self._config.max_power_of_ten

    @property
    def snapshot(self) -> tuple[int, ...]:
        """The currently published sequence of powers."""
        return self._powers

    def __len__(self) -> int:
        return len(self._powers)

    def __repr__(self) -> str:
        return f"PowersOfTen(cached={len(self._powers)}, max_power={self.max_power})"

    def get(self, power: int) -> int:
        """Return ``10**power``, growing the cache when needed.

        Raises:
            PowerOutOfRangeError: If power is negative or above max_power
        """
        if power < 0:
            raise PowerOutOfRangeError(f"Power of ten must be non-negative, got {power}")
        if power > self.max_power:
            logger.debug("power_out_of_range", power=power, max_power=self.max_power)
            raise PowerOutOfRangeError(
                f"Power of ten {power} exceeds maximum {self.max_power}"
            )

        while True:
            powers = self._powers
            if power < len(powers):
                return powers[power]

            extended = list(powers)
            last = extended[-1]
            while len(extended) <= power:
                last *= 10
                extended.append(last)
            published = tuple(extended)

            if self._compare_and_publish(powers, published):
                logger.debug("power_cache_extended", size=len(published))
                return published[power]
            logger.debug("power_cache_publish_lost", requested=power, size=len(powers))

    def ensure(self, power: int) -> None:
        """Make sure ``10**power`` is cached.

        Raises:
            PowerOutOfRangeError: If power is negative or above max_power
        """
        if power >= len(self._powers) or power < 0:
            self.get(power)

    def _compare_and_publish(self, expected: tuple[int, ...], replacement: tuple[int, ...]) -> bool:
        """Publish replacement only if expected is still the current snapshot."""
        with self._publish_lock:
            if self._powers is not expected:
                return False
            self._powers = replacement
            return True


# Process-wide cache shared by every BigFraction
POWERS_OF_TEN = PowersOfTen()


def get_power_of_ten(power: int) -> int:
    """Return ``10**power`` from the shared cache.

    Raises:
        PowerOutOfRangeError: If power is negative or above MAX_POWER_OF_TEN
    """
    return POWERS_OF_TEN.get(power)
