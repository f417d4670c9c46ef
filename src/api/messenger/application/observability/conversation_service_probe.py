"""Protocol for conversation application service observability.

Defines the interface for domain probes that capture application-level
domain events for conversation use cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConversationServiceProbe(Protocol):
    """Domain probe for conversation application service operations."""

    def conversation_started(
        self,
        conversation_id: str,
        owner_id: str,
        participant_count: int,
    ) -> None:
        """Record that a conversation was started."""
        ...

    def membership_changed(
        self,
        conversation_id: str,
        acting_user_id: str,
        user_id: str,
        change: str,
    ) -> None:
        """Record that a participant was added or removed."""
        ...

    def message_posted(
        self,
        conversation_id: str,
        message_id: str,
        sender_id: str,
    ) -> None:
        """Record that a message was posted."""
        ...

    def operation_failed(
        self,
        operation: str,
        error: str,
        conversation_id: str | None = None,
    ) -> None:
        """Record that a use case failed."""
        ...

    def with_context(self, context: ObservationContext) -> ConversationServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConversationServiceProbe:
    """Default implementation of ConversationServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        kwargs = self._context.as_dict()
        # Every event carries conversation_id explicitly.
        kwargs.pop("conversation_id", None)
        return kwargs

    def with_context(
        self, context: ObservationContext
    ) -> DefaultConversationServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultConversationServiceProbe(logger=self._logger, context=context)

    def conversation_started(
        self,
        conversation_id: str,
        owner_id: str,
        participant_count: int,
    ) -> None:
        """Record that a conversation was started."""
        self._logger.info(
            "conversation_started",
            conversation_id=conversation_id,
            owner_id=owner_id,
            participant_count=participant_count,
            **self._get_context_kwargs(),
        )

    def membership_changed(
        self,
        conversation_id: str,
        acting_user_id: str,
        user_id: str,
        change: str,
    ) -> None:
        """Record that a participant was added or removed."""
        self._logger.info(
            "conversation_membership_changed",
            conversation_id=conversation_id,
            acting_user_id=acting_user_id,
            member_user_id=user_id,
            change=change,
            **self._get_context_kwargs(),
        )

    def message_posted(
        self,
        conversation_id: str,
        message_id: str,
        sender_id: str,
    ) -> None:
        """Record that a message was posted."""
        self._logger.info(
            "conversation_message_posted",
            conversation_id=conversation_id,
            message_id=message_id,
            sender_id=sender_id,
            **self._get_context_kwargs(),
        )

    def operation_failed(
        self,
        operation: str,
        error: str,
        conversation_id: str | None = None,
    ) -> None:
        """Record that a use case failed."""
        self._logger.warning(
            "conversation_operation_failed",
            operation=operation,
            error=error,
            conversation_id=conversation_id,
            **self._get_context_kwargs(),
        )
