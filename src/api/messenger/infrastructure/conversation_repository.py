"""SQLAlchemy implementation of IConversationRepository.

Translates the Conversation aggregate's flat, identifier-based state into
three tables: conversations, conversation_participants (junction table,
ordered by position) and messages (ordered by sequence).
"""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import as_utc
from messenger.domain.aggregates import Conversation, Message
from messenger.domain.value_objects import ConversationId, MessageId, UserId
from messenger.infrastructure.models import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
)
from messenger.infrastructure.observability import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
)
from messenger.ports.repositories import IConversationRepository


class ConversationRepository(IConversationRepository):
    """Database-backed repository for Conversation aggregates.

    Retrieved aggregates are fully hydrated: participants in display order
    and messages in delivery order. Transactions are owned by the caller;
    this repository only flushes.

    On save, pending domain events are drained from the aggregate and
    reported through the probe.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: ConversationRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession owned by the caller
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultConversationRepositoryProbe()

    async def save(self, conversation: Conversation) -> None:
        """Persist conversation state.

        Inserts the conversation row if needed, brings the participant rows
        in line with the aggregate and inserts any messages not stored yet.

        Args:
            conversation: The Conversation aggregate to persist
        """
        conversation_id = conversation.id.value

        stmt = select(ConversationModel).where(ConversationModel.id == conversation_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            model = ConversationModel(
                id=conversation_id,
                owner_id=conversation.owner_id.value,
                created_at=conversation.created_at,
            )
            self._session.add(model)
            # Flush so participant and message rows can reference it
            await self._session.flush()

        await self._sync_participants(conversation)
        new_message_count = await self._append_new_messages(conversation)
        await self._session.flush()

        for event in conversation.collect_events():
            self._probe.domain_event_persisted(conversation_id, type(event).__name__)

        self._probe.conversation_saved(
            conversation_id,
            participant_count=len(conversation.participants),
            new_message_count=new_message_count,
        )

    async def get_by_id(self, conversation_id: ConversationId) -> Conversation | None:
        """Fetch the conversation row and hydrate participants and messages.

        Args:
            conversation_id: The unique identifier of the conversation

        Returns:
            The Conversation aggregate, or None if not found
        """
        stmt = select(ConversationModel).where(
            ConversationModel.id == conversation_id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.conversation_not_found(conversation_id.value)
            return None

        conversation = await self._hydrate(model)
        self._probe.conversation_retrieved(
            model.id,
            participant_count=len(conversation.participants),
            message_count=len(conversation.messages),
        )
        return conversation

    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        """List conversations a user owns or participates in.

        Args:
            user_id: The user to list conversations for

        Returns:
            List of Conversation aggregates, oldest first
        """
        participating = select(ConversationParticipantModel.conversation_id).where(
            ConversationParticipantModel.user_id == user_id.value
        )
        stmt = (
            select(ConversationModel)
            .where(
                or_(
                    ConversationModel.owner_id == user_id.value,
                    ConversationModel.id.in_(participating),
                )
            )
            .order_by(ConversationModel.created_at, ConversationModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [await self._hydrate(model) for model in models]

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete a conversation.

        Participant and message rows go with it through ON DELETE CASCADE.

        Args:
            conversation_id: The conversation to delete

        Returns:
            True if deleted, False if not found
        """
        stmt = select(ConversationModel).where(
            ConversationModel.id == conversation_id.value
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.conversation_not_found(conversation_id.value)
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.conversation_deleted(conversation_id.value)
        return True

    async def _sync_participants(self, conversation: Conversation) -> None:
        """Delete removed participants, insert new ones, rewrite positions."""
        stmt = select(ConversationParticipantModel).where(
            ConversationParticipantModel.conversation_id == conversation.id.value
        )
        result = await self._session.execute(stmt)
        stored = {row.user_id: row for row in result.scalars().all()}

        desired = [p.value for p in conversation.participants]
        desired_set = set(desired)

        for user_id, row in stored.items():
            if user_id not in desired_set:
                await self._session.delete(row)

        for position, user_id in enumerate(desired):
            row = stored.get(user_id)
            if row is None:
                self._session.add(
                    ConversationParticipantModel(
                        conversation_id=conversation.id.value,
                        user_id=user_id,
                        position=position,
                    )
                )
            elif row.position != position:
                row.position = position

    async def _append_new_messages(self, conversation: Conversation) -> int:
        """Insert messages that are not stored yet. Returns how many."""
        stmt = select(MessageModel.id).where(
            MessageModel.conversation_id == conversation.id.value
        )
        result = await self._session.execute(stmt)
        stored_ids = set(result.scalars().all())

        added = 0
        for sequence, message in enumerate(conversation.messages):
            if message.id.value in stored_ids:
                continue
            self._session.add(
                MessageModel(
                    id=message.id.value,
                    conversation_id=conversation.id.value,
                    sender_id=message.sender_id.value,
                    sequence=sequence,
                    content=message.content,
                    created_at=message.created_at,
                )
            )
            added += 1
        return added

    async def _hydrate(self, model: ConversationModel) -> Conversation:
        """Load participants and messages for a conversation row."""
        participants_stmt = (
            select(ConversationParticipantModel.user_id)
            .where(ConversationParticipantModel.conversation_id == model.id)
            .order_by(ConversationParticipantModel.position)
        )
        participants_result = await self._session.execute(participants_stmt)
        participant_ids = [
            UserId(value=user_id) for user_id in participants_result.scalars().all()
        ]

        messages_stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == model.id)
            .order_by(MessageModel.sequence)
        )
        messages_result = await self._session.execute(messages_stmt)
        conversation_id = ConversationId(value=model.id)
        messages = [
            Message(
                id=MessageId(value=row.id),
                conversation_id=conversation_id,
                sender_id=UserId(value=row.sender_id),
                content=row.content,
                created_at=as_utc(row.created_at),
            )
            for row in messages_result.scalars().all()
        ]

        return Conversation.reconstitute(
            id=conversation_id,
            owner_id=UserId(value=model.owner_id),
            participants=participant_ids,
            messages=messages,
            created_at=as_utc(model.created_at),
        )
