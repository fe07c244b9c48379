"""Price parsing for display strings such as ``"$1,799.00"``."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..exceptions import InvalidPriceError

PriceInput = Union[str, int, float, Decimal]

CENTS = Decimal("0.01")
# Storage column is Numeric(10, 2)
MAX_PRICE = Decimal("100000000")


def parse_price(raw: PriceInput) -> Decimal:
    """
    Convert a price into a non-negative Decimal rounded to cents.

    Accepts numbers and display strings with a currency symbol,
    thousands separators and surrounding whitespace.

    Raises:
        InvalidPriceError: If the value is empty, unparsable, not finite,
            negative or too large to store.
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidPriceError(raw)

    if isinstance(raw, str):
        cleaned = raw.strip().replace("$", "").replace(",", "").strip()
        if not cleaned:
            raise InvalidPriceError(raw, "empty")
    else:
        # str() first so floats keep their shortest repr (899.99, not 899.9899...)
        cleaned = str(raw)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidPriceError(raw) from None

    if not amount.is_finite():
        raise InvalidPriceError(raw, "not finite")
    if amount < 0:
        raise InvalidPriceError(raw, "negative")
    if amount >= MAX_PRICE:
        raise InvalidPriceError(raw, "too large")

    rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded >= MAX_PRICE:
        raise InvalidPriceError(raw, "too large")
    return rounded


def format_price(amount: Decimal) -> str:
    """Format a price the way product screens display it (``$899.00``)."""
    return f"${amount:,.2f}"
