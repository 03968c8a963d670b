"""Mathematical utilities for decimal fractions.

This package provides the integer primitives behind BigFraction:
- PowersOfTen: shared, lazily grown cache of powers of ten
- Digit conversion helpers that stay exact for very long numbers
"""

from bigfraction.math.digits import digits_to_int, div_trunc, format_int, int_to_digits
from bigfraction.math.powers import POWERS_OF_TEN, PowersOfTen, get_power_of_ten

__all__ = [
    "POWERS_OF_TEN",
    "PowersOfTen",
    "get_power_of_ten",
    "div_trunc",
    "digits_to_int",
    "format_int",
    "int_to_digits",
]
