"""Domain aggregates for the Messenger context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from messenger.domain.aggregates.conversation import Conversation
from messenger.domain.aggregates.message import Message
from messenger.domain.aggregates.user import User

__all__ = [
    "Conversation",
    "Message",
    "User",
]
