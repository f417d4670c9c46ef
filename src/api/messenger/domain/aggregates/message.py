"""Message entity for the Messenger context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from messenger.domain.value_objects import ConversationId, MessageId, UserId


@dataclass(frozen=True)
class Message:
    """A message posted to a conversation.

    Messages belong to the Conversation aggregate and are only created
    through Conversation.send_message(). Once created, nothing about a
    message changes.
    """

    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    created_at: datetime

    def __eq__(self, other: object) -> bool:
        """Messages are equal if they have the same ID."""
        if not isinstance(other, Message):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
