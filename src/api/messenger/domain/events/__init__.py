"""Domain events for the Messenger bounded context.

Domain events capture facts about things that have happened in the domain.
They are immutable value objects that carry all the information needed
to describe the occurrence of an event.
"""

from messenger.domain.events.conversation import (
    ConversationCreated,
    MessageSent,
    ParticipantAdded,
    ParticipantRemoved,
)

# Type alias for all domain events in the Messenger context
DomainEvent = ConversationCreated | ParticipantAdded | ParticipantRemoved | MessageSent

__all__ = [
    "ConversationCreated",
    "ParticipantAdded",
    "ParticipantRemoved",
    "MessageSent",
    "DomainEvent",
]
