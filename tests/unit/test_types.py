"""Tests for the pydantic fraction field type."""

from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from bigfraction import BigFraction
from bigfraction.types import FRACTION_PATTERN, FractionField, serialize_fraction, validate_fraction
from tests.helpers import f


class Quote(BaseModel):
    """Test model carrying fractions."""

    price: FractionField
    fee: FractionField | None = None


class TestValidateFraction:
    """Tests for validate_fraction."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("12.50", "12.5"),
            ("-.5", "-0.5"),
            (7, "7"),
            (Decimal("0.010"), "0.01"),
        ],
    )
    def test_accepted(self, value, expected):
        """Strings, ints and Decimals convert."""
        assert str(validate_fraction(value)) == expected

    def test_passthrough(self):
        """BigFraction values are returned unchanged."""
        value = f("1.5")
        assert validate_fraction(value) is value

    @pytest.mark.parametrize("value", [1.5, True, None, [1], "1.2.3", "", " 1"])
    def test_rejected(self, value):
        """Everything else is a ValueError."""
        with pytest.raises(ValueError):
            validate_fraction(value)

    def test_serialize(self):
        """Serialization is the canonical text."""
        assert serialize_fraction(f("0002.1000")) == "2.1"


class TestFractionField:
    """Tests for FractionField inside a model."""

    def test_validate_from_json_string(self):
        """JSON strings become BigFraction."""
        quote = Quote.model_validate_json('{"price": "12.50"}')
        assert isinstance(quote.price, BigFraction)
        assert quote.price == f("12.5")
        assert quote.fee is None

    def test_validate_from_python(self):
        """Python values convert too."""
        quote = Quote(price=3, fee="0.001")
        assert quote.price == 3
        assert quote.fee == f("0.001")

    def test_dump_json(self):
        """JSON output uses canonical strings."""
        quote = Quote(price="-0.50", fee="10")
        assert quote.model_dump_json() == '{"price":"-0.5","fee":"10"}'

    def test_dump_python_keeps_type(self):
        """Python dumps keep BigFraction values."""
        dumped = Quote(price="1.25").model_dump()
        assert isinstance(dumped["price"], BigFraction)

    def test_round_trip(self):
        """JSON dump then validate gives an equal model."""
        quote = Quote(price="123.456", fee="-0.000001")
        assert Quote.model_validate_json(quote.model_dump_json()) == quote

    @pytest.mark.parametrize("payload", ['{"price": 1.5}', '{"price": "abc"}', '{"price": true}'])
    def test_invalid(self, payload):
        """Floats, bad text and bools fail validation."""
        with pytest.raises(ValidationError):
            Quote.model_validate_json(payload)

    def test_json_schema(self):
        """The schema describes a patterned string."""
        schema = Quote.model_json_schema()
        price = schema["properties"]["price"]
        assert price["type"] == "string"
        assert price["pattern"] == FRACTION_PATTERN
