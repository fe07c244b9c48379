"""
Payment Method Enum.

Payment options offered on the payment screen.
"""
from enum import Enum


class PaymentMethod(str, Enum):
    """Payment method values."""

    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    APPLE_PAY = "Apple Pay"
    GOOGLE_PAY = "Google Pay"

    @property
    def requires_card(self) -> bool:
        """Card-based methods must supply card details."""
        return self in (PaymentMethod.CREDIT_CARD, PaymentMethod.DEBIT_CARD)
