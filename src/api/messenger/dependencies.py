"""Wiring for Messenger application services.

Every factory takes the session the caller opened so that the service and
its repositories share one unit of work.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from messenger.application.services import ConversationService, UserService
from messenger.infrastructure.conversation_repository import ConversationRepository
import messenger.infrastructure.models  # noqa: F401
from messenger.infrastructure.user_repository import UserRepository
from shared_kernel.identity import IdGenerator


def get_user_repository(session: AsyncSession) -> UserRepository:
    """Get UserRepository instance bound to the session."""
    return UserRepository(session=session)


def get_conversation_repository(session: AsyncSession) -> ConversationRepository:
    """Get ConversationRepository instance bound to the session."""
    return ConversationRepository(session=session)


def get_user_service(
    session: AsyncSession, id_generator: IdGenerator | None = None
) -> UserService:
    """Get UserService instance.

    Args:
        session: Database session for transaction management
        id_generator: Optional identifier source for new users

    Returns:
        UserService instance
    """
    return UserService(
        session=session,
        user_repository=get_user_repository(session),
        id_generator=id_generator,
    )


def get_conversation_service(
    session: AsyncSession, id_generator: IdGenerator | None = None
) -> ConversationService:
    """Get ConversationService instance.

    Args:
        session: Database session for transaction management
        id_generator: Optional identifier source for conversations and messages

    Returns:
        ConversationService instance
    """
    return ConversationService(
        session=session,
        conversation_repository=get_conversation_repository(session),
        user_repository=get_user_repository(session),
        id_generator=id_generator,
    )
