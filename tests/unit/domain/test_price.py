"""Tests for price parsing and formatting."""
from decimal import Decimal

import pytest

from cenphone.domain.exceptions import InvalidPriceError, ValidationError
from cenphone.domain.value_objects import format_price, parse_price


class TestParsePrice:
    """Display strings and numbers into Decimal."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$899", Decimal("899.00")),
            ("899", Decimal("899.00")),
            ("$1,799.00", Decimal("1799.00")),
            (" $999.5 ", Decimal("999.50")),
            (699, Decimal("699.00")),
            (899.99, Decimal("899.99")),
            (Decimal("10.005"), Decimal("10.01")),
            ("0", Decimal("0.00")),
        ],
    )
    def test_valid_prices(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "$", "abc", "$12x", "-5", "NaN", "Infinity", None, True, "1e30", "$99999999999999999999999999999", 1e40],
    )
    def test_invalid_prices_raise(self, raw):
        with pytest.raises(InvalidPriceError):
            parse_price(raw)

    def test_invalid_price_is_a_validation_error(self):
        """Callers catching ValidationError also see price problems."""
        with pytest.raises(ValidationError) as exc_info:
            parse_price("free")
        assert "price" in exc_info.value.errors
        assert exc_info.value.raw_price == "free"


class TestFormatPrice:
    def test_format_with_thousands(self):
        assert format_price(Decimal("1799")) == "$1,799.00"

    def test_format_small(self):
        assert format_price(Decimal("899.5")) == "$899.50"


class TestPriceLimits:
    """Prices must fit the Numeric(10, 2) storage column."""

    def test_largest_storable_price(self):
        assert parse_price("$99,999,999.99") == Decimal("99999999.99")

    @pytest.mark.parametrize("raw", ["100000000", "99999999.995"])
    def test_too_large(self, raw):
        with pytest.raises(InvalidPriceError) as exc_info:
            parse_price(raw)
        assert "too large" in exc_info.value.errors["price"]
