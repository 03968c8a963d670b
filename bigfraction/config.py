"""Configuration for decimal fraction arithmetic."""

from dataclasses import dataclass

from bigfraction.constants import FLOAT_FORMAT_DIGITS, MAX_POWER_OF_TEN


@dataclass(frozen=True)
class FractionConfig:
    """Centralized configuration for the fraction core.

    Holds the limits shared by the power-of-ten cache and float conversion,
    so tests can run against a different configuration without touching
    module state.

    Attributes:
        max_power_of_ten: Ceiling for the power-of-ten cache (default: 10,000)
        float_format_digits: Fixed fractional digits used by from_float (default: 20)
    """

    max_power_of_ten: int = MAX_POWER_OF_TEN
    float_format_digits: int = FLOAT_FORMAT_DIGITS

    def __post_init__(self) -> None:
        if self.max_power_of_ten < 0:
            raise ValueError(f"max_power_of_ten must be non-negative, got {self.max_power_of_ten}")
        if self.float_format_digits < 0:
            raise ValueError(
                f"float_format_digits must be non-negative, got {self.float_format_digits}"
            )


# Default configuration instance
DEFAULT_FRACTION_CONFIG = FractionConfig()
