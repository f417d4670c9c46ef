"""Repository protocols (ports) for the Messenger bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. The domain only sees flat identifiers; implementations decide
how those map onto tables.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from messenger.domain.aggregates import Conversation, User
from messenger.domain.value_objects import ConversationId, UserId


@runtime_checkable
class IConversationRepository(Protocol):
    """Repository for Conversation aggregate persistence.

    Returns fully hydrated Conversation aggregates (participants and
    messages loaded) per DDD pattern.
    """

    async def save(self, conversation: Conversation) -> None:
        """Persist a conversation aggregate.

        Creates a new conversation or updates an existing one. Participant
        changes are synchronised and new messages appended.

        Args:
            conversation: The Conversation aggregate to persist
        """
        ...

    async def get_by_id(self, conversation_id: ConversationId) -> Conversation | None:
        """Retrieve a conversation by its ID.

        Args:
            conversation_id: The unique identifier of the conversation

        Returns:
            The Conversation aggregate, or None if not found
        """
        ...

    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        """List conversations a user owns or participates in.

        Args:
            user_id: The user to list conversations for

        Returns:
            List of Conversation aggregates, oldest first
        """
        ...

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete a conversation together with its participants and messages.

        Args:
            conversation_id: The conversation to delete

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User persistence.

    This is the identity provider seen by the Messenger context: it turns
    bare identifiers into User references.
    """

    async def save(self, user: User) -> None:
        """Persist a user.

        Creates a new user or updates an existing one.

        Args:
            user: The User to persist

        Raises:
            DuplicateEmailError: If another user already has this email
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User, or None if not found
        """
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by their email.

        Args:
            email: The email to search for

        Returns:
            The User, or None if not found
        """
        ...
