"""Domain-Oriented Observability for Messenger infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from messenger.infrastructure.observability.repository_probe import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "ConversationRepositoryProbe",
    "DefaultConversationRepositoryProbe",
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
]
