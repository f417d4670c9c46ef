"""User application service for the Messenger bounded context."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from messenger.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId
from messenger.ports.repositories import IUserRepository
from shared_kernel.identity import IdGenerator


class UserService:
    """Application service for user registration and lookup."""

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        id_generator: IdGenerator | None = None,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            session: Database session for transaction management
            user_repository: Repository for user persistence
            id_generator: Optional identifier source for new users
            probe: Optional domain probe for observability
        """
        self._session = session
        self._user_repository = user_repository
        self._id_generator = id_generator
        self._probe = probe or DefaultUserServiceProbe()

    async def register_user(self, email: str, address: Address | None = None) -> User:
        """Register a new user.

        Args:
            email: Contact email, unique across users
            address: Optional postal address

        Returns:
            The registered User

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        user = User.register(
            email=email, address=address, id_generator=self._id_generator
        )
        try:
            async with self._session.begin():
                await self._user_repository.save(user)
        except Exception as e:
            self._probe.user_registration_failed(email=email, error=str(e))
            raise

        self._probe.user_registered(user_id=user.id.value, email=email)
        return user

    async def get_user(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: The user to retrieve

        Returns:
            The User, or None if not found
        """
        async with self._session.begin():
            return await self._user_repository.get_by_id(user_id)
