"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConnectionProbe(Protocol):
    """Domain probe for database engine and schema observability.

    This probe captures domain-significant events related to the database
    without exposing logging implementation details.
    """

    def engine_created(self, backend: str, connection_string: str) -> None:
        """Record that a database engine was created."""
        ...

    def connection_verified(self, backend: str) -> None:
        """Record that a round trip to the database succeeded."""
        ...

    def connection_failed(self, backend: str, error: Exception) -> None:
        """Record that the database could not be reached."""
        ...

    def engine_disposed(self) -> None:
        """Record that a database engine was disposed."""
        ...

    def schema_created(self, table_count: int) -> None:
        """Record that the schema was created."""
        ...

    def schema_dropped(self) -> None:
        """Record that the schema was dropped."""
        ...

    def schema_operation_failed(self, operation: str, error: Exception) -> None:
        """Record that creating or dropping the schema failed."""
        ...

    def with_context(self, context: ObservationContext) -> ConnectionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultConnectionProbe:
        """Create a new probe with observation context bound."""
        return DefaultConnectionProbe(logger=self._logger, context=context)

    def engine_created(self, backend: str, connection_string: str) -> None:
        """Record that a database engine was created."""
        self._logger.info(
            "database_engine_created",
            backend=backend,
            connection_string=connection_string,
            **self._get_context_kwargs(),
        )

    def connection_verified(self, backend: str) -> None:
        """Record that a round trip to the database succeeded."""
        self._logger.info(
            "database_connection_verified",
            backend=backend,
            **self._get_context_kwargs(),
        )

    def connection_failed(self, backend: str, error: Exception) -> None:
        """Record that the database could not be reached."""
        self._logger.error(
            "database_connection_failed",
            backend=backend,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def engine_disposed(self) -> None:
        """Record that a database engine was disposed."""
        self._logger.info(
            "database_engine_disposed",
            **self._get_context_kwargs(),
        )

    def schema_created(self, table_count: int) -> None:
        """Record that the schema was created."""
        self._logger.info(
            "database_schema_created",
            table_count=table_count,
            **self._get_context_kwargs(),
        )

    def schema_dropped(self) -> None:
        """Record that the schema was dropped."""
        self._logger.info(
            "database_schema_dropped",
            **self._get_context_kwargs(),
        )

    def schema_operation_failed(self, operation: str, error: Exception) -> None:
        """Record that creating or dropping the schema failed."""
        self._logger.error(
            "database_schema_operation_failed",
            operation=operation,
            error=str(error),
            **self._get_context_kwargs(),
        )
