"""Pydantic field types for models that carry decimal fractions.

Usage:
    from pydantic import BaseModel
    from bigfraction.types import FractionField

    class Quote(BaseModel):
        price: FractionField

    Quote.model_validate({"price": "12.50"}).price   # BigFraction('12.5')
    Quote(price="12.50").model_dump_json()           # '{"price":"12.5"}'
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from bigfraction.errors import BigFractionError
from bigfraction.fraction import BigFraction

# Matches text accepted by bigfraction.parse
FRACTION_PATTERN = r"^-?([0-9]+(\.[0-9]+)?|\.[0-9]+)$"


def validate_fraction(value: Any) -> BigFraction:
    """Convert a field value to BigFraction.

    Args:
        value: BigFraction, decimal string, int or Decimal

    Returns:
        The canonical BigFraction

    Raises:
        ValueError: If value is a float, bool, unsupported type or malformed string
    """
    if isinstance(value, BigFraction):
        return value

    # bool is an int subclass, but True is not a price
    if isinstance(value, bool):
        raise ValueError("Fraction cannot be a bool")

    if isinstance(value, float):
        raise ValueError(f"Fraction must be given as a string, not float: {value!r}")

    if not isinstance(value, (str, int, Decimal)):
        raise ValueError(f"Fraction must be string, int or Decimal, got {type(value).__name__}")

    try:
        return BigFraction(value)
    except BigFractionError as err:
        raise ValueError(f"Invalid fraction: {value!r} ({err})") from err


def serialize_fraction(value: BigFraction) -> str:
    """Canonical text for JSON output."""
    return str(value)


# Exact decimal fraction, exchanged as a canonical decimal string in JSON
FractionField = Annotated[
    BigFraction,
    PlainValidator(validate_fraction),
    PlainSerializer(serialize_fraction, return_type=str, when_used="json"),
    WithJsonSchema(
        {
            "type": "string",
            "pattern": FRACTION_PATTERN,
            "description": "Exact decimal fraction as a decimal string",
        }
    ),
]
