"""Conversation aggregate for the Messenger context."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from messenger.domain.aggregates.message import Message
from messenger.domain.events import (
    ConversationCreated,
    MessageSent,
    ParticipantAdded,
    ParticipantRemoved,
)
from messenger.domain.exceptions import (
    InvariantViolationError,
    MessengerError,
    UnauthorizedError,
)
from messenger.domain.observability import (
    ConversationProbe,
    DefaultConversationProbe,
)
from messenger.domain.value_objects import ConversationId, MessageId, UserId
from shared_kernel.identity import IdGenerator

if TYPE_CHECKING:
    from messenger.domain.aggregates.user import User
    from messenger.domain.events import DomainEvent


@dataclass(eq=False)
class Conversation:
    """Conversation aggregate: one chat between an owner and participants.

    The owner is the user who started the conversation. Only the owner may
    change who takes part; the owner and the current participants may post.

    Business rules:
    - The owner is never listed among the participants
    - A user appears at most once among the participants
    - Only the owner may add or remove participants
    - Only the owner or a current participant may send a message
    - Messages are append-only; removing a participant keeps their history

    Every check runs before any state change, so a rejected operation leaves
    participants, messages and pending events exactly as they were.

    Event collection:
    - All mutating operations record domain events
    - Events can be collected via collect_events()
    """

    id: ConversationId
    owner_id: UserId
    created_at: datetime
    _participants: list[UserId] = field(default_factory=list, repr=False)
    _messages: list[Message] = field(default_factory=list, repr=False)
    _pending_events: list[DomainEvent] = field(default_factory=list, repr=False)
    _probe: ConversationProbe = field(
        default_factory=DefaultConversationProbe,
        repr=False,
    )

    @classmethod
    def create(
        cls,
        owner: User,
        initial_participants: Iterable[User],
        id_generator: IdGenerator | None = None,
        probe: ConversationProbe | None = None,
    ) -> "Conversation":
        """Factory method for starting a new conversation.

        Args:
            owner: The user starting the conversation
            initial_participants: Users invited from the start, in display order
            id_generator: Optional identifier source (ULID by default)
            probe: Optional observability probe for domain events

        Returns:
            A new Conversation with ConversationCreated event recorded

        Raises:
            InvariantViolationError: If the owner is among the participants,
                or the same user is listed twice
        """
        participant_ids = [user.id for user in initial_participants]

        if owner.id in participant_ids:
            raise InvariantViolationError("owner cannot be a participant")

        if len(set(participant_ids)) != len(participant_ids):
            raise InvariantViolationError("duplicate participant")

        now = datetime.now(UTC)
        conversation = cls(
            id=ConversationId.generate(id_generator),
            owner_id=owner.id,
            created_at=now,
            _participants=participant_ids,
            _probe=probe or DefaultConversationProbe(),
        )
        conversation._pending_events.append(
            ConversationCreated(
                conversation_id=conversation.id.value,
                owner_id=owner.id.value,
                participant_ids=tuple(p.value for p in participant_ids),
                occurred_at=now,
            )
        )
        conversation._probe.conversation_created(
            conversation_id=conversation.id.value,
            owner_id=owner.id.value,
            participant_count=len(participant_ids),
        )
        return conversation

    @classmethod
    def reconstitute(
        cls,
        id: ConversationId,
        owner_id: UserId,
        participants: Sequence[UserId],
        messages: Sequence[Message],
        created_at: datetime,
        probe: ConversationProbe | None = None,
    ) -> "Conversation":
        """Rebuild a conversation from stored state.

        Stored state is trusted: no business rules are re-checked and no
        events are recorded.

        Args:
            id: Stored conversation id
            owner_id: Stored owner id
            participants: Participant ids in stored order
            messages: Messages in delivery order
            created_at: When the conversation was started
            probe: Optional observability probe

        Returns:
            The Conversation aggregate
        """
        return cls(
            id=id,
            owner_id=owner_id,
            created_at=created_at,
            _participants=list(participants),
            _messages=list(messages),
            _probe=probe or DefaultConversationProbe(),
        )

    @property
    def participants(self) -> tuple[UserId, ...]:
        """Read-only view of current participants, in insertion order."""
        return tuple(self._participants)

    @property
    def messages(self) -> tuple[Message, ...]:
        """Read-only view of messages, in delivery order."""
        return tuple(self._messages)

    def add_participant(self, acting_user_id: UserId, candidate: User) -> None:
        """Add a user to the conversation.

        Args:
            acting_user_id: The user performing the change
            candidate: The user to add

        Raises:
            UnauthorizedError: If the acting user is not the owner
            InvariantViolationError: If the candidate is the owner or
                already a participant
        """
        if not self.is_owner(acting_user_id):
            raise self._rejected(
                "add_participant",
                acting_user_id,
                UnauthorizedError("only owner may modify membership"),
            )

        if self.is_owner(candidate.id):
            raise self._rejected(
                "add_participant",
                acting_user_id,
                InvariantViolationError("owner cannot be a participant"),
            )

        if self.is_participant(candidate.id):
            raise self._rejected(
                "add_participant",
                acting_user_id,
                InvariantViolationError("already a participant"),
            )

        self._participants.append(candidate.id)

        self._pending_events.append(
            ParticipantAdded(
                conversation_id=self.id.value,
                user_id=candidate.id.value,
                added_by=acting_user_id.value,
                occurred_at=datetime.now(UTC),
            )
        )
        self._probe.participant_added(
            conversation_id=self.id.value,
            user_id=candidate.id.value,
        )

    def remove_participant(self, acting_user_id: UserId, target: User) -> None:
        """Remove a participant from the conversation.

        The owner is never a participant, so asking to remove the owner
        fails like any other non-participant.

        Args:
            acting_user_id: The user performing the change
            target: The participant to remove

        Raises:
            UnauthorizedError: If the acting user is not the owner
            InvariantViolationError: If the target is not a participant
        """
        if not self.is_owner(acting_user_id):
            raise self._rejected(
                "remove_participant",
                acting_user_id,
                UnauthorizedError("only owner may modify membership"),
            )

        if not self.is_participant(target.id):
            raise self._rejected(
                "remove_participant",
                acting_user_id,
                InvariantViolationError("not a participant"),
            )

        self._participants = [p for p in self._participants if p != target.id]

        self._pending_events.append(
            ParticipantRemoved(
                conversation_id=self.id.value,
                user_id=target.id.value,
                removed_by=acting_user_id.value,
                occurred_at=datetime.now(UTC),
            )
        )
        self._probe.participant_removed(
            conversation_id=self.id.value,
            user_id=target.id.value,
        )

    def send_message(
        self,
        sender_id: UserId,
        content: str,
        id_generator: IdGenerator | None = None,
    ) -> Message:
        """Post a message to the conversation.

        Membership is checked now; it does not matter whether the sender
        stays a member afterwards.

        Args:
            sender_id: The author
            content: Message text (not validated)
            id_generator: Optional identifier source for the message id

        Returns:
            The appended Message

        Raises:
            UnauthorizedError: If the sender is neither owner nor participant
        """
        if not self.is_member(sender_id):
            raise self._rejected(
                "send_message",
                sender_id,
                UnauthorizedError("not a member"),
            )

        now = datetime.now(UTC)
        message = Message(
            id=MessageId.generate(id_generator),
            conversation_id=self.id,
            sender_id=sender_id,
            content=content,
            created_at=now,
        )
        self._messages.append(message)

        self._pending_events.append(
            MessageSent(
                conversation_id=self.id.value,
                message_id=message.id.value,
                sender_id=sender_id.value,
                occurred_at=now,
            )
        )
        self._probe.message_sent(
            conversation_id=self.id.value,
            message_id=message.id.value,
            sender_id=sender_id.value,
        )
        return message

    def is_owner(self, user_id: UserId) -> bool:
        """Check if a user owns this conversation."""
        return self.owner_id == user_id

    def is_participant(self, user_id: UserId) -> bool:
        """Check if a user is a participant (the owner never is)."""
        return any(p == user_id for p in self._participants)

    def is_member(self, user_id: UserId) -> bool:
        """Check if a user may post: the owner or a participant."""
        return self.is_owner(user_id) or self.is_participant(user_id)

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear pending domain events.

        Returns:
            List of pending domain events
        """
        events = self._pending_events.copy()
        self._pending_events.clear()
        return events

    def _rejected(
        self, operation: str, acting_user_id: UserId, error: MessengerError
    ) -> MessengerError:
        self._probe.mutation_rejected(
            conversation_id=self.id.value,
            operation=operation,
            acting_user_id=acting_user_id.value,
            reason=str(error),
        )
        return error

    def __eq__(self, other: object) -> bool:
        """Conversations are equal if they have the same ID."""
        if not isinstance(other, Conversation):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
