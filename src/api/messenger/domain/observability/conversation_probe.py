"""Observability probes for the Conversation aggregate.

Domain probes for Conversation following Domain Oriented Observability pattern.
Probes emit structured logs with domain-specific context for membership
changes, messages, and rejected mutations.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConversationProbe(Protocol):
    """Protocol for conversation aggregate observability probes."""

    def conversation_created(
        self,
        conversation_id: str,
        owner_id: str,
        participant_count: int,
    ) -> None:
        """Probe emitted when a conversation is started."""
        ...

    def participant_added(
        self,
        conversation_id: str,
        user_id: str,
    ) -> None:
        """Probe emitted when a participant joins."""
        ...

    def participant_removed(
        self,
        conversation_id: str,
        user_id: str,
    ) -> None:
        """Probe emitted when a participant is removed."""
        ...

    def message_sent(
        self,
        conversation_id: str,
        message_id: str,
        sender_id: str,
    ) -> None:
        """Probe emitted when a message is appended."""
        ...

    def mutation_rejected(
        self,
        conversation_id: str,
        operation: str,
        acting_user_id: str,
        reason: str,
    ) -> None:
        """Probe emitted when an operation fails a domain check.

        Args:
            conversation_id: The conversation ID
            operation: Name of the rejected operation
            acting_user_id: The user who attempted it
            reason: Human readable reason from the raised error
        """
        ...


class DefaultConversationProbe:
    """Default implementation of ConversationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()

    def conversation_created(
        self,
        conversation_id: str,
        owner_id: str,
        participant_count: int,
    ) -> None:
        """Log conversation creation with structured context."""
        self._logger.info(
            "conversation_created",
            conversation_id=conversation_id,
            owner_id=owner_id,
            participant_count=participant_count,
        )

    def participant_added(
        self,
        conversation_id: str,
        user_id: str,
    ) -> None:
        """Log participant addition with structured context."""
        self._logger.info(
            "conversation_participant_added",
            conversation_id=conversation_id,
            user_id=user_id,
        )

    def participant_removed(
        self,
        conversation_id: str,
        user_id: str,
    ) -> None:
        """Log participant removal with structured context."""
        self._logger.info(
            "conversation_participant_removed",
            conversation_id=conversation_id,
            user_id=user_id,
        )

    def message_sent(
        self,
        conversation_id: str,
        message_id: str,
        sender_id: str,
    ) -> None:
        """Log message append with structured context."""
        self._logger.debug(
            "conversation_message_sent",
            conversation_id=conversation_id,
            message_id=message_id,
            sender_id=sender_id,
        )

    def mutation_rejected(
        self,
        conversation_id: str,
        operation: str,
        acting_user_id: str,
        reason: str,
    ) -> None:
        """Log rejected mutation with structured context."""
        self._logger.warning(
            "conversation_mutation_rejected",
            conversation_id=conversation_id,
            operation=operation,
            acting_user_id=acting_user_id,
            reason=reason,
        )
