"""BigFraction - exact arbitrary-precision decimal fractions."""

from bigfraction.config import DEFAULT_FRACTION_CONFIG, FractionConfig
from bigfraction.constants import MAX_POWER_OF_TEN
from bigfraction.errors import (
    BigFractionError,
    CanonicalFormError,
    DecimalCountError,
    FractionFormatError,
    FractionRangeError,
    PowerOutOfRangeError,
)
from bigfraction.fraction import ZERO, BigFraction, divide_pow10
from bigfraction.math.powers import get_power_of_ten
from bigfraction.parsing import parse, try_parse, try_parse_default
from bigfraction.sequences import sum_fractions

__version__ = "0.1.0"
__all__ = [
    # Value type
    "BigFraction",
    "ZERO",
    "MAX_POWER_OF_TEN",
    # Operations
    "divide_pow10",
    "get_power_of_ten",
    "parse",
    "try_parse",
    "try_parse_default",
    "sum_fractions",
    # Config
    "FractionConfig",
    "DEFAULT_FRACTION_CONFIG",
    # Errors
    "BigFractionError",
    "FractionFormatError",
    "FractionRangeError",
    "PowerOutOfRangeError",
    "DecimalCountError",
    "CanonicalFormError",
    "__version__",
]
