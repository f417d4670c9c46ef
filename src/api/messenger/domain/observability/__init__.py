"""Domain-Oriented Observability for the Messenger domain layer.

Probes for domain aggregate operations following Domain-Oriented Observability patterns.
"""

from messenger.domain.observability.conversation_probe import (
    ConversationProbe,
    DefaultConversationProbe,
)

__all__ = [
    "ConversationProbe",
    "DefaultConversationProbe",
]
