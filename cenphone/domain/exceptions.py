"""Custom exceptions for the CenPhone store."""

from datetime import datetime, timedelta
from typing import Dict, Optional


class CenPhoneError(Exception):
    """Base exception for all CenPhone errors."""

    pass


class ValidationError(CenPhoneError):
    """Raised when input is missing or malformed.

    ``errors`` maps each offending field to a user-facing message.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Validation failed ({details})")


class InvalidPriceError(ValidationError):
    """Raised when a price cannot be parsed or is negative."""

    def __init__(self, raw_price: object, reason: str = "not a valid price"):
        self.raw_price = raw_price
        super().__init__({"price": f"{raw_price!r} is {reason}"})


class DuplicateAccountError(CenPhoneError):
    """Raised when registering an email or username that already exists."""

    def __init__(self, email: str, username: str):
        self.email = email
        self.username = username
        super().__init__(
            f"An account already exists with email '{email}' or username '{username}'"
        )


class InvalidCredentialsError(CenPhoneError):
    """Raised when login fails. Does not say which credential was wrong."""

    def __init__(self):
        super().__init__("Invalid email or password")


class NotAuthenticatedError(CenPhoneError):
    """Raised when an operation needs a logged-in user and the session is anonymous."""

    def __init__(self):
        super().__init__("No logged-in user found")


class NotFoundError(CenPhoneError):
    """Raised when a referenced record does not exist."""

    def __init__(self, kind: str, identifier: object):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class PersistenceError(CenPhoneError):
    """Raised when the store fails to commit. The transaction has been rolled back."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Failed to {operation}: {reason}")


class OrderError(CenPhoneError):
    """Base class for order business-rule rejections."""

    pass


class DuplicateOrderError(OrderError):
    """Raised when the (customer, product) pair already has an order."""

    def __init__(self, customer_id: object, product_id: object):
        self.customer_id = customer_id
        self.product_id = product_id
        super().__init__(
            f"Order already exists for customer {customer_id} and product {product_id}"
        )


class MissingOrderDateError(OrderError):
    """Raised when cancelling an order that has no order date."""

    def __init__(self, order_id: object):
        self.order_id = order_id
        super().__init__(f"Order date is missing for order {order_id}")


class OrderAlreadyCanceledError(OrderError):
    """Raised when cancelling an order that is already canceled."""

    def __init__(self, order_id: object):
        self.order_id = order_id
        super().__init__(f"Order {order_id} is already canceled")


class CancellationWindowExpiredError(OrderError):
    """Raised when the cancellation window has closed."""

    def __init__(
        self,
        order_id: object,
        order_date: datetime,
        window: timedelta,
        now: Optional[datetime] = None,
    ):
        self.order_id = order_id
        self.order_date = order_date
        self.window = window
        self.now = now
        hours = window.total_seconds() / 3600
        super().__init__(
            f"Cannot cancel order {order_id} placed at {order_date.isoformat()}: "
            f"older than {hours:g} hours"
        )


class CheckoutStateError(CenPhoneError):
    """Raised when a checkout step is attempted before the step it depends on."""

    def __init__(self, step: str, required: str):
        self.step = step
        self.required = required
        super().__init__(f"Cannot run '{step}' before '{required}' is complete")
