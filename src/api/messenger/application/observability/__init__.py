"""Application-level observability for the Messenger context."""

from messenger.application.observability.conversation_service_probe import (
    ConversationServiceProbe,
    DefaultConversationServiceProbe,
)
from messenger.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "ConversationServiceProbe",
    "DefaultConversationServiceProbe",
    "DefaultUserServiceProbe",
    "UserServiceProbe",
]
