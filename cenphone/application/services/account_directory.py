"""Application service for shopper accounts."""

import logging
from typing import Optional

from cenphone.application.dtos.account_dto import ProfileUpdateRequest, RegisterUserRequest
from cenphone.application.session import Session
from cenphone.data.uow import UnitOfWorkFactory
from cenphone.domain.entities import User
from cenphone.domain.exceptions import (
    DuplicateAccountError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from cenphone.domain.value_objects import CustomerId, DeliveryAddress
from cenphone.infrastructure.security import PasswordHasher

logger = logging.getLogger(__name__)


class AccountDirectory:
    """
    Registration, login and profile maintenance.

    Responsibilities:
    - Enforce unique email and username
    - Hash passwords (plaintext never reaches storage or logs)
    - One Unit of Work per call
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, hasher: Optional[PasswordHasher] = None) -> None:
        """Initialize account directory.

        Args:
            uow_factory: Callable returning a fresh Unit of Work
            hasher: Password hasher (defaults to PBKDF2 with standard rounds)
        """
        self._uow_factory = uow_factory
        self._hasher = hasher or PasswordHasher()

    async def register(self, request: RegisterUserRequest) -> CustomerId:
        """Create a new account.

        Args:
            request: RegisterUserRequest DTO

        Returns:
            CustomerId of the new user

        Raises:
            ValidationError: If a field is empty or the passwords differ
            DuplicateAccountError: If the email or username is taken
            PersistenceError: If the commit fails
        """
        errors = request.field_errors()
        if errors:
            raise ValidationError(errors)

        email = request.email.strip()
        username = request.username.strip()

        async with self._uow_factory() as uow:
            if await uow.users.exists_with_email_or_username(email, username):
                logger.warning(f"Registration rejected, account exists: {email}")
                raise DuplicateAccountError(email, username)

            user = User(
                customer_id=CustomerId.generate(),
                full_name=request.full_name.strip(),
                address=request.address.strip(),
                city=request.city.strip(),
                province=request.province.strip(),
                country=request.country.strip(),
                telephone=request.telephone.strip(),
                email=email,
                username=username,
                password_hash=self._hasher.hash(request.password),
            )
            await uow.users.add(user)
            await uow.commit()

        logger.info(f"✅ Registered user {user.customer_id} ({user.email})")
        return user.customer_id

    async def authenticate(self, email: str, password: str) -> bool:
        """True iff a user with exactly this email exists and the password matches."""
        async with self._uow_factory() as uow:
            user = await uow.users.find_by_email(email)

        if user is None:
            return False
        return self._hasher.verify(password, user.password_hash)

    async def login(self, email: str, password: str, session: Optional[Session] = None) -> Session:
        """Authenticate and sign the session in.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (not distinguished)
        """
        async with self._uow_factory() as uow:
            user = await uow.users.find_by_email(email)

        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.warning(f"Login failed for {email}")
            raise InvalidCredentialsError()

        session = session or Session.anonymous()
        session.sign_in(user.customer_id, user.email)
        logger.info(f"User {user.customer_id} logged in")
        return session

    def logout(self, session: Session) -> None:
        if session.is_authenticated:
            logger.info(f"User {session.customer_id} logged out")
        session.sign_out()

    async def get_user(self, customer_id: CustomerId) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get(customer_id)
        if user is None:
            raise NotFoundError("User", customer_id)
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._uow_factory() as uow:
            return await uow.users.find_by_email(email)

    async def update_profile(self, customer_id: CustomerId, request: ProfileUpdateRequest) -> User:
        """Overwrite contact details and optionally the password.

        Raises:
            ValidationError: Empty address fields or mismatched new password
            NotFoundError: Unknown user
            PersistenceError: If the commit fails
        """
        errors = request.field_errors()
        if errors:
            raise ValidationError(errors)

        async with self._uow_factory() as uow:
            user = await uow.users.get(customer_id)
            if user is None:
                raise NotFoundError("User", customer_id)

            user.update_contact(
                address=request.address.strip(),
                city=request.city.strip(),
                province=request.province.strip(),
                country=request.country.strip(),
                telephone=request.telephone.strip(),
            )
            if request.changes_password:
                user.change_password_hash(self._hasher.hash(request.new_password))

            await uow.users.update(user)
            await uow.commit()

        logger.info(f"✅ Profile updated for user {customer_id}")
        return user

    async def update_address(self, customer_id: CustomerId, address: DeliveryAddress) -> User:
        """Replace only the address fields (checkout "save to profile")."""
        address.validate()

        async with self._uow_factory() as uow:
            user = await uow.users.get(customer_id)
            if user is None:
                raise NotFoundError("User", customer_id)
            user.move_to(address)
            await uow.users.update(user)
            await uow.commit()

        logger.info(f"Address saved to profile for user {customer_id}")
        return user
