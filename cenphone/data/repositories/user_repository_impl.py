"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from cenphone.domain.entities import User
from cenphone.domain.exceptions import NotFoundError
from cenphone.domain.repositories import UserRepository
from cenphone.domain.value_objects import CustomerId

from ..mappers import UserMapper
from ..models import UserModel


class SqlAlchemyUserRepository(UserRepository):
    """Concrete implementation of UserRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, user: User) -> None:
        self._session.add(UserMapper.to_persistence(user))
        await self._session.flush()  # Propagate to DB without committing

    async def get(self, customer_id: CustomerId) -> Optional[User]:
        model = await self._session.get(UserModel, str(customer_id))
        return UserMapper.to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        model = result.scalar_one_or_none()
        return UserMapper.to_domain(model) if model else None

    async def exists_with_email_or_username(self, email: str, username: str) -> bool:
        result = await self._session.execute(
            select(UserModel.customer_id)
            .where(or_(UserModel.email == email, UserModel.username == username))
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def update(self, user: User) -> None:
        model = await self._session.get(UserModel, str(user.customer_id))
        if model is None:
            raise NotFoundError("User", user.customer_id)
        UserMapper.update_persistence(user, model)
        await self._session.flush()
