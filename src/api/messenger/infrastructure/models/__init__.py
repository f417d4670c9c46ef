"""SQLAlchemy ORM models for the Messenger bounded context.

These models map to database tables and are used by repository implementations.
"""

from messenger.infrastructure.models.conversation import (
    ConversationModel,
    ConversationParticipantModel,
)
from messenger.infrastructure.models.message import MessageModel
from messenger.infrastructure.models.user import UserModel

__all__ = [
    "ConversationModel",
    "ConversationParticipantModel",
    "MessageModel",
    "UserModel",
]
