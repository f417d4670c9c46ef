"""Domain probe for Messenger repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to user and conversation persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserRepositoryProbe(Protocol):
    """Domain probe for user repository operations."""

    def user_saved(self, user_id: str, email: str) -> None:
        """Record that a user was successfully saved."""
        ...

    def user_retrieved(self, user_id: str) -> None:
        """Record that a user was retrieved."""
        ...

    def user_not_found(self, user_id: str) -> None:
        """Record that a user was not found."""
        ...

    def email_not_found(self, email: str) -> None:
        """Record that no user has the given email."""
        ...

    def duplicate_email(self, email: str) -> None:
        """Record that a duplicate email was detected."""
        ...

    def with_context(self, context: ObservationContext) -> UserRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class ConversationRepositoryProbe(Protocol):
    """Domain probe for conversation repository operations."""

    def conversation_saved(
        self,
        conversation_id: str,
        participant_count: int,
        new_message_count: int,
    ) -> None:
        """Record that a conversation was successfully saved."""
        ...

    def conversation_retrieved(
        self, conversation_id: str, participant_count: int, message_count: int
    ) -> None:
        """Record that a conversation was retrieved and hydrated."""
        ...

    def conversation_not_found(self, conversation_id: str) -> None:
        """Record that a conversation was not found."""
        ...

    def conversation_deleted(self, conversation_id: str) -> None:
        """Record that a conversation was deleted."""
        ...

    def domain_event_persisted(self, conversation_id: str, event_type: str) -> None:
        """Record that a pending domain event was drained on save."""
        ...

    def with_context(self, context: ObservationContext) -> ConversationRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserRepositoryProbe:
    """Default implementation of UserRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self, *explicit: str) -> dict[str, Any]:
        """Get context metadata as kwargs for logging, minus explicit keys."""
        if self._context is None:
            return {}
        kwargs = self._context.as_dict()
        for key in explicit:
            kwargs.pop(key, None)
        return kwargs

    def with_context(self, context: ObservationContext) -> DefaultUserRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserRepositoryProbe(logger=self._logger, context=context)

    def user_saved(self, user_id: str, email: str) -> None:
        """Record that a user was successfully saved."""
        self._logger.info(
            "user_saved",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs("user_id"),
        )

    def user_retrieved(self, user_id: str) -> None:
        """Record that a user was retrieved."""
        self._logger.debug(
            "user_retrieved",
            user_id=user_id,
            **self._get_context_kwargs("user_id"),
        )

    def user_not_found(self, user_id: str) -> None:
        """Record that a user was not found."""
        self._logger.debug(
            "user_not_found",
            user_id=user_id,
            **self._get_context_kwargs("user_id"),
        )

    def email_not_found(self, email: str) -> None:
        """Record that no user has the given email."""
        self._logger.debug(
            "email_not_found",
            email=email,
            **self._get_context_kwargs(),
        )

    def duplicate_email(self, email: str) -> None:
        """Record that a duplicate email was detected."""
        self._logger.warning(
            "duplicate_email",
            email=email,
            **self._get_context_kwargs(),
        )


class DefaultConversationRepositoryProbe:
    """Default implementation of ConversationRepositoryProbe using structlog."""

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
    ) -> DefaultConversationRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultConversationRepositoryProbe(logger=self._logger, context=context)

    def conversation_saved(
        self,
        conversation_id: str,
        participant_count: int,
        new_message_count: int,
    ) -> None:
        """Record that a conversation was successfully saved."""
        self._logger.info(
            "conversation_saved",
            conversation_id=conversation_id,
            participant_count=participant_count,
            new_message_count=new_message_count,
            **self._get_context_kwargs(),
        )

    def conversation_retrieved(
        self, conversation_id: str, participant_count: int, message_count: int
    ) -> None:
        """Record that a conversation was retrieved and hydrated."""
        self._logger.debug(
            "conversation_retrieved",
            conversation_id=conversation_id,
            participant_count=participant_count,
            message_count=message_count,
            **self._get_context_kwargs(),
        )

    def conversation_not_found(self, conversation_id: str) -> None:
        """Record that a conversation was not found."""
        self._logger.debug(
            "conversation_not_found",
            conversation_id=conversation_id,
            **self._get_context_kwargs(),
        )

    def conversation_deleted(self, conversation_id: str) -> None:
        """Record that a conversation was deleted."""
        self._logger.info(
            "conversation_deleted",
            conversation_id=conversation_id,
            **self._get_context_kwargs(),
        )

    def domain_event_persisted(self, conversation_id: str, event_type: str) -> None:
        """Record that a pending domain event was drained on save."""
        self._logger.debug(
            "conversation_domain_event_persisted",
            conversation_id=conversation_id,
            event_type=event_type,
            **self._get_context_kwargs(),
        )
