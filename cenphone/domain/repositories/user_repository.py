"""Repository interface for User records."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User
from ..value_objects import CustomerId


class UserRepository(ABC):
    """Abstract repository for User persistence."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Stage a new user for insert.

        Args:
            user: User to persist
        """
        pass

    @abstractmethod
    async def get(self, customer_id: CustomerId) -> Optional[User]:
        """Retrieve user by identifier.

        Args:
            customer_id: CustomerId identifier

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by exact (case-sensitive) email."""
        pass

    @abstractmethod
    async def exists_with_email_or_username(self, email: str, username: str) -> bool:
        """Check whether either identity attribute is taken (duplicate prevention).

        Args:
            email: Email to look for
            username: Username to look for

        Returns:
            True if any user has that email or that username
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Stage changes to an existing user."""
        pass
