"""
Tests for card and delivery validation.

The reference date is 2024-06-01, so the current two-digit year is 24.
"""
from datetime import date

import pytest

from cenphone.domain.enums import PaymentMethod
from cenphone.domain.exceptions import ValidationError
from cenphone.domain.value_objects import CardDetails, DeliveryAddress

TODAY = date(2024, 6, 1)


def card(**overrides) -> CardDetails:
    data = {
        "card_number": "4111 1111 1111 1111",
        "expiry_date": "12/26",
        "cvv": "123",
        "card_holder_name": "Jane Doe",
    }
    data.update(overrides)
    return CardDetails(**data)


class TestCardDetails:
    """Each card field is validated on its own."""

    def test_valid_card_passes(self):
        card().validate(TODAY)

    def test_card_number_ignores_separators(self):
        assert card(card_number="4111-1111-1111-1111").card_number_error() is None

    @pytest.mark.parametrize("number", ["4111", "4111 1111 1111 11111", ""])
    def test_card_number_must_have_16_digits(self, number):
        assert card(card_number=number).card_number_error() is not None

    @pytest.mark.parametrize(
        "expiry, message",
        [
            ("1226", "Enter a valid date (MM/YY)"),
            ("ab/cd", "Enter a valid date (MM/YY)"),
            ("13/25", "Invalid month"),
            ("00/25", "Invalid month"),
            ("12/23", "Invalid year"),
            ("12/35", "Invalid year"),
            ("05/24", "Card has expired"),
        ],
    )
    def test_expiry_errors(self, expiry, message):
        assert card(expiry_date=expiry).expiry_date_error(TODAY) == message

    @pytest.mark.parametrize("expiry", ["06/24", "01/25", "12/34"])
    def test_expiry_boundaries_accepted(self, expiry):
        """Current month and ten years ahead are both still valid."""
        assert card(expiry_date=expiry).expiry_date_error(TODAY) is None

    @pytest.mark.parametrize("cvv, ok", [("123", True), ("1234", True), ("12", False), ("12345", False)])
    def test_cvv_length(self, cvv, ok):
        assert (card(cvv=cvv).cvv_error() is None) is ok

    def test_all_errors_reported_together(self):
        bad = CardDetails(card_number="1", expiry_date="99/99", cvv="", card_holder_name="  ")
        with pytest.raises(ValidationError) as exc_info:
            bad.validate(TODAY)
        assert set(exc_info.value.errors) == {"card_number", "expiry_date", "cvv", "card_holder_name"}

    def test_masked_number(self):
        assert card().masked_number == "**** 1111"


class TestPaymentMethod:
    def test_card_methods_require_card(self):
        assert PaymentMethod.CREDIT_CARD.requires_card
        assert PaymentMethod.DEBIT_CARD.requires_card

    def test_wallets_do_not_require_card(self):
        assert not PaymentMethod.APPLE_PAY.requires_card
        assert not PaymentMethod.GOOGLE_PAY.requires_card


class TestDeliveryAddress:
    def test_valid_address(self):
        address = DeliveryAddress("1 King St", "Toronto", "ON", "Canada")
        address.validate()
        assert str(address) == "1 King St, Toronto, ON, Canada"

    def test_empty_fields_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            DeliveryAddress("", "Toronto", " ", "Canada").validate()
        assert set(exc_info.value.errors) == {"street_address", "province"}
