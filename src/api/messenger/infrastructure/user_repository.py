"""SQLAlchemy implementation of IUserRepository.

Acts as the identity provider for the Messenger context: it resolves bare
user identifiers into User references.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId
from messenger.infrastructure.models import UserModel
from messenger.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from messenger.ports.exceptions import DuplicateEmailError
from messenger.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """Database-backed repository for User records.

    Transactions are owned by the caller; this repository only flushes.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession owned by the caller
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def save(self, user: User) -> None:
        """Persist a user.

        Creates a new user or updates an existing one.

        Args:
            user: The User to persist

        Raises:
            DuplicateEmailError: If another user already has this email
        """
        stmt = select(UserModel).where(UserModel.email == user.email)
        result = await self._session.execute(stmt)
        same_email = result.scalar_one_or_none()
        if same_email is not None and same_email.id != user.id.value:
            self._probe.duplicate_email(user.email)
            raise DuplicateEmailError(f"Email '{user.email}' is already registered")

        stmt = select(UserModel).where(UserModel.id == user.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        street, city, country = _address_columns(user.address)

        if model:
            model.email = user.email
            model.address_street = street
            model.address_city = city
            model.address_country = country
        else:
            model = UserModel(
                id=user.id.value,
                email=user.email,
                address_street=street,
                address_city=city,
                address_country=country,
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.user_saved(user.id.value, user.email)

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User, or None if not found
        """
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(user_id.value)
            return None

        self._probe.user_retrieved(user_id.value)
        return _to_domain(model)

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by their email.

        Args:
            email: The email to search for

        Returns:
            The User, or None if not found
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.email_not_found(email)
            return None

        self._probe.user_retrieved(model.id)
        return _to_domain(model)


def _address_columns(
    address: Address | None,
) -> tuple[str | None, str | None, str | None]:
    if address is None:
        return None, None, None
    return address.street, address.city, address.country


def _to_domain(model: UserModel) -> User:
    address = None
    if model.address_street is not None:
        address = Address(
            street=model.address_street,
            city=model.address_city or "",
            country=model.address_country or "",
        )
    return User(
        id=UserId(value=model.id),
        email=model.email,
        address=address,
    )
