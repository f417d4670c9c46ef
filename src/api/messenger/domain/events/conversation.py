"""Conversation domain events for the Messenger context.

Domain events related to conversation lifecycle, membership and messaging.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ConversationCreated:
    """Event raised when a new conversation is started.

    Attributes:
        conversation_id: The ULID of the created conversation
        owner_id: The ULID of the user who started it
        participant_ids: Initial participants, in order
        occurred_at: When the event occurred (UTC)
    """

    conversation_id: str
    owner_id: str
    participant_ids: tuple[str, ...]
    occurred_at: datetime


@dataclass(frozen=True)
class ParticipantAdded:
    """Event raised when the owner adds a participant.

    Attributes:
        conversation_id: The ULID of the conversation
        user_id: The ULID of the user being added
        added_by: The ULID of the acting user (always the owner)
        occurred_at: When the event occurred (UTC)
    """

    conversation_id: str
    user_id: str
    added_by: str
    occurred_at: datetime


@dataclass(frozen=True)
class ParticipantRemoved:
    """Event raised when the owner removes a participant.

    Attributes:
        conversation_id: The ULID of the conversation
        user_id: The ULID of the user being removed
        removed_by: The ULID of the acting user (always the owner)
        occurred_at: When the event occurred (UTC)
    """

    conversation_id: str
    user_id: str
    removed_by: str
    occurred_at: datetime


@dataclass(frozen=True)
class MessageSent:
    """Event raised when a member posts a message.

    Attributes:
        conversation_id: The ULID of the conversation
        message_id: The ULID of the new message
        sender_id: The ULID of the author
        occurred_at: When the event occurred (UTC)
    """

    conversation_id: str
    message_id: str
    sender_id: str
    occurred_at: datetime
