"""Conversation application service for the Messenger bounded context.

Orchestrates conversation use cases: resolving user identifiers through the
identity provider, loading the aggregate, applying the domain operation and
persisting the result within a single transaction.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from messenger.application.observability import (
    ConversationServiceProbe,
    DefaultConversationServiceProbe,
)
from messenger.domain.aggregates import Conversation, Message, User
from messenger.domain.value_objects import ConversationId, UserId
from messenger.ports.exceptions import ConversationNotFoundError, UserNotFoundError
from messenger.ports.repositories import IConversationRepository, IUserRepository
from shared_kernel.identity import IdGenerator


class ConversationService:
    """Application service for conversations.

    Each public method is one use case and runs in its own transaction.
    Domain errors (UnauthorizedError, InvariantViolationError) propagate
    unchanged; nothing is written when one is raised.
    """

    def __init__(
        self,
        session: AsyncSession,
        conversation_repository: IConversationRepository,
        user_repository: IUserRepository,
        id_generator: IdGenerator | None = None,
        probe: ConversationServiceProbe | None = None,
    ):
        """Initialize ConversationService with dependencies.

        Args:
            session: Database session for transaction management
            conversation_repository: Repository for conversation persistence
            user_repository: Identity provider resolving user identifiers
            id_generator: Optional identifier source for new conversations
                and messages
            probe: Optional domain probe for observability
        """
        self._session = session
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository
        self._id_generator = id_generator
        self._probe = probe or DefaultConversationServiceProbe()

    async def start_conversation(
        self,
        owner_id: UserId,
        participant_ids: Sequence[UserId],
    ) -> Conversation:
        """Start a new conversation.

        Args:
            owner_id: The user starting the conversation
            participant_ids: Users to include from the start, in display order

        Returns:
            The created Conversation aggregate

        Raises:
            UserNotFoundError: If any of the users does not exist
            InvariantViolationError: If the owner is listed as a participant
                or a participant is listed twice
        """
        try:
            async with self._session.begin():
                owner = await self._resolve_user(owner_id)
                participants = [await self._resolve_user(p) for p in participant_ids]

                conversation = Conversation.create(
                    owner=owner,
                    initial_participants=participants,
                    id_generator=self._id_generator,
                )
                await self._conversation_repository.save(conversation)
        except Exception as e:
            self._probe.operation_failed("start_conversation", str(e))
            raise

        self._probe.conversation_started(
            conversation_id=conversation.id.value,
            owner_id=owner_id.value,
            participant_count=len(conversation.participants),
        )
        return conversation

    async def add_participant(
        self,
        conversation_id: ConversationId,
        acting_user_id: UserId,
        candidate_id: UserId,
    ) -> Conversation:
        """Add a user to a conversation.

        Args:
            conversation_id: The conversation to change
            acting_user_id: The user performing the change (must be owner)
            candidate_id: The user to add

        Returns:
            The updated Conversation aggregate

        Raises:
            ConversationNotFoundError: If the conversation does not exist
            UserNotFoundError: If the candidate does not exist
            UnauthorizedError: If the acting user is not the owner
            InvariantViolationError: If the candidate is already a member
        """
        try:
            async with self._session.begin():
                conversation = await self._load(conversation_id)
                candidate = await self._resolve_user(candidate_id)

                conversation.add_participant(acting_user_id, candidate)
                await self._conversation_repository.save(conversation)
        except Exception as e:
            self._probe.operation_failed(
                "add_participant", str(e), conversation_id=conversation_id.value
            )
            raise

        self._probe.membership_changed(
            conversation_id=conversation_id.value,
            acting_user_id=acting_user_id.value,
            user_id=candidate_id.value,
            change="added",
        )
        return conversation

    async def remove_participant(
        self,
        conversation_id: ConversationId,
        acting_user_id: UserId,
        target_id: UserId,
    ) -> Conversation:
        """Remove a participant from a conversation.

        Args:
            conversation_id: The conversation to change
            acting_user_id: The user performing the change (must be owner)
            target_id: The participant to remove

        Returns:
            The updated Conversation aggregate

        Raises:
            ConversationNotFoundError: If the conversation does not exist
            UserNotFoundError: If the target does not exist
            UnauthorizedError: If the acting user is not the owner
            InvariantViolationError: If the target is not a participant
        """
        try:
            async with self._session.begin():
                conversation = await self._load(conversation_id)
                target = await self._resolve_user(target_id)

                conversation.remove_participant(acting_user_id, target)
                await self._conversation_repository.save(conversation)
        except Exception as e:
            self._probe.operation_failed(
                "remove_participant", str(e), conversation_id=conversation_id.value
            )
            raise

        self._probe.membership_changed(
            conversation_id=conversation_id.value,
            acting_user_id=acting_user_id.value,
            user_id=target_id.value,
            change="removed",
        )
        return conversation

    async def send_message(
        self,
        conversation_id: ConversationId,
        sender_id: UserId,
        content: str,
    ) -> Message:
        """Post a message to a conversation.

        Args:
            conversation_id: The conversation to post to
            sender_id: The author (must be owner or participant)
            content: Message text

        Returns:
            The stored Message

        Raises:
            ConversationNotFoundError: If the conversation does not exist
            UnauthorizedError: If the sender is not a member
        """
        try:
            async with self._session.begin():
                conversation = await self._load(conversation_id)

                message = conversation.send_message(
                    sender_id, content, id_generator=self._id_generator
                )
                await self._conversation_repository.save(conversation)
        except Exception as e:
            self._probe.operation_failed(
                "send_message", str(e), conversation_id=conversation_id.value
            )
            raise

        self._probe.message_posted(
            conversation_id=conversation_id.value,
            message_id=message.id.value,
            sender_id=sender_id.value,
        )
        return message

    async def get_conversation(
        self, conversation_id: ConversationId
    ) -> Conversation | None:
        """Get a conversation by ID.

        Args:
            conversation_id: The conversation to retrieve

        Returns:
            The Conversation aggregate, or None if not found
        """
        async with self._session.begin():
            return await self._conversation_repository.get_by_id(conversation_id)

    async def list_conversations(self, user_id: UserId) -> list[Conversation]:
        """List the conversations a user owns or participates in.

        Args:
            user_id: The user whose conversations to list

        Returns:
            List of Conversation aggregates
        """
        async with self._session.begin():
            return await self._conversation_repository.list_for_user(user_id)

    async def _load(self, conversation_id: ConversationId) -> Conversation:
        conversation = await self._conversation_repository.get_by_id(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(
                f"Conversation {conversation_id.value} not found"
            )
        return conversation

    async def _resolve_user(self, user_id: UserId) -> User:
        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id.value} not found")
        return user
