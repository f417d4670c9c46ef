"""Protocol for user application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_registered(self, user_id: str, email: str) -> None:
        """Record that a user was registered."""
        ...

    def user_registration_failed(self, email: str, error: str) -> None:
        """Record that registering a user failed."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self, *explicit: str) -> dict[str, Any]:
        if self._context is None:
            return {}
        kwargs = self._context.as_dict()
        for key in explicit:
            kwargs.pop(key, None)
        return kwargs

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_registered(self, user_id: str, email: str) -> None:
        """Record that a user was registered."""
        self._logger.info(
            "user_registered",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs("user_id"),
        )

    def user_registration_failed(self, email: str, error: str) -> None:
        """Record that registering a user failed."""
        self._logger.warning(
            "user_registration_failed",
            email=email,
            error=error,
            **self._get_context_kwargs(),
        )
