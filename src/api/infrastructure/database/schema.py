"""Schema management for the application database.

Creates and drops every table registered on the declarative Base. Used to
prepare fresh databases, in particular the in-memory SQLite database the
integration tests run against.

Tables are registered by importing the ORM models of each bounded context
(for example `messenger.infrastructure.models`) before calling these
functions; this module knows nothing about them.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from infrastructure.database.exceptions import SchemaError
from infrastructure.database.models import Base
from infrastructure.observability import ConnectionProbe, DefaultConnectionProbe


async def create_schema(
    engine: AsyncEngine, probe: ConnectionProbe | None = None
) -> None:
    """Create all tables that do not exist yet.

    Args:
        engine: Engine to create the tables on
        probe: Optional domain probe for observability

    Raises:
        SchemaError: If the tables cannot be created
    """
    probe = probe or DefaultConnectionProbe()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        probe.schema_operation_failed("create", e)
        raise SchemaError(f"Failed to create schema: {e}", operation="create") from e

    probe.schema_created(len(Base.metadata.tables))


async def drop_schema(engine: AsyncEngine, probe: ConnectionProbe | None = None) -> None:
    """Drop all tables.

    Args:
        engine: Engine to drop the tables from
        probe: Optional domain probe for observability

    Raises:
        SchemaError: If the tables cannot be dropped
    """
    probe = probe or DefaultConnectionProbe()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    except SQLAlchemyError as e:
        probe.schema_operation_failed("drop", e)
        raise SchemaError(f"Failed to drop schema: {e}", operation="drop") from e

    probe.schema_dropped()
