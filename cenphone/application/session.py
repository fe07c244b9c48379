"""Explicit login session handed to whatever needs the current user."""

from typing import Optional

from cenphone.domain.exceptions import NotAuthenticatedError
from cenphone.domain.value_objects import CustomerId


class Session:
    """Who is logged in on this device. Anonymous until ``sign_in``."""

    def __init__(self, customer_id: Optional[CustomerId] = None, email: Optional[str] = None):
        self.customer_id = customer_id
        self.email = email

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.customer_id is not None

    def sign_in(self, customer_id: CustomerId, email: str) -> None:
        self.customer_id = customer_id
        self.email = email

    def sign_out(self) -> None:
        self.customer_id = None
        self.email = None

    def require_customer(self) -> CustomerId:
        """
        Raises:
            NotAuthenticatedError: If nobody is logged in
        """
        if self.customer_id is None:
            raise NotAuthenticatedError()
        return self.customer_id

    def __repr__(self) -> str:
        return f"Session(customer_id={self.customer_id}, email={self.email!r})"
