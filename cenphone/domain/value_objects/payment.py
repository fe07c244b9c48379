"""Payment and delivery value objects.

Card details are validated locally and never transmitted anywhere.
"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

from ..exceptions import ValidationError

CARD_NUMBER_DIGITS = 16
CVV_DIGITS = (3, 4)
MAX_EXPIRY_YEARS_AHEAD = 10


def _digits(value: str) -> str:
    return "".join(ch for ch in value if ch.isdigit())


@dataclass(frozen=True)
class CardDetails:
    """Card fields entered on the payment screen."""

    card_number: str
    expiry_date: str  # MM/YY
    cvv: str
    card_holder_name: str

    def card_number_error(self) -> Optional[str]:
        if len(_digits(self.card_number)) != CARD_NUMBER_DIGITS:
            return f"Card number must be {CARD_NUMBER_DIGITS} digits"
        return None

    def expiry_date_error(self, today: date) -> Optional[str]:
        parts = self.expiry_date.strip().split("/")
        if len(parts) != 2 or not all(part.strip().isdigit() for part in parts):
            return "Enter a valid date (MM/YY)"

        month, year = int(parts[0]), int(parts[1])
        current_year = today.year % 100

        if month < 1 or month > 12:
            return "Invalid month"
        if year < current_year or year > current_year + MAX_EXPIRY_YEARS_AHEAD:
            return "Invalid year"
        if year == current_year and month < today.month:
            return "Card has expired"
        return None

    def cvv_error(self) -> Optional[str]:
        if len(_digits(self.cvv)) not in CVV_DIGITS:
            return "CVV must be 3 or 4 digits"
        return None

    def card_holder_name_error(self) -> Optional[str]:
        if not self.card_holder_name.strip():
            return "Cardholder name is required"
        return None

    def validate(self, today: date) -> None:
        """
        Validate every card field independently.

        Raises:
            ValidationError: Listing all failing fields at once.
        """
        checks = {
            "card_number": self.card_number_error(),
            "expiry_date": self.expiry_date_error(today),
            "cvv": self.cvv_error(),
            "card_holder_name": self.card_holder_name_error(),
        }
        errors: Dict[str, str] = {field: msg for field, msg in checks.items() if msg}
        if errors:
            raise ValidationError(errors)

    @property
    def masked_number(self) -> str:
        """Last four digits only, for logs and receipts."""
        return f"**** {_digits(self.card_number)[-4:]}"


@dataclass(frozen=True)
class DeliveryAddress:
    """Delivery address confirmed on the customer info screen."""

    street_address: str
    city: str
    province: str
    country: str

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If any of the four address fields is empty.
        """
        errors = {
            field: f"{field.replace('_', ' ').capitalize()} is required"
            for field in ("street_address", "city", "province", "country")
            if not getattr(self, field).strip()
        }
        if errors:
            raise ValidationError(errors)

    def __str__(self) -> str:
        return f"{self.street_address}, {self.city}, {self.province}, {self.country}"
