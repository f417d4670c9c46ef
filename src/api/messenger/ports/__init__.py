"""Ports (interfaces) for the Messenger bounded context."""

from messenger.ports.exceptions import (
    ConversationNotFoundError,
    DuplicateEmailError,
    UserNotFoundError,
)
from messenger.ports.repositories import IConversationRepository, IUserRepository

__all__ = [
    "ConversationNotFoundError",
    "DuplicateEmailError",
    "IConversationRepository",
    "IUserRepository",
    "UserNotFoundError",
]
