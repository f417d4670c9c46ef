"""Application services for the Messenger bounded context."""

from messenger.application.services.conversation_service import ConversationService
from messenger.application.services.user_service import UserService

__all__ = [
    "ConversationService",
    "UserService",
]
