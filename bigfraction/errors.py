"""BigFraction error classes.

Range and format errors are also ValueErrors so callers catching the builtin
still see them.
"""


class BigFractionError(ArithmeticError):
    """Base error for BigFraction operations."""

    pass


class FractionFormatError(BigFractionError, ValueError):
    """Text is not a valid decimal fraction."""

    pass


class FractionRangeError(BigFractionError, ValueError):
    """An argument lies outside its permitted range."""

    pass


class PowerOutOfRangeError(FractionRangeError):
    """Power of ten is negative or above MAX_POWER_OF_TEN."""

    pass


class DecimalCountError(FractionRangeError):
    """Decimal count for truncation or formatting is negative."""

    pass


class CanonicalFormError(BigFractionError):
    """A value was about to be built in non-canonical form.

    This signals a defect inside the library, never bad user input.
    """

    pass
