"""Database session provisioning.

Holds the process-wide engine and sessionmaker, created lazily from
DatabaseSettings on first use.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine, dispose_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Module-level engine and sessionmaker (created on first use)
_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a sessionmaker bound to the given engine.

    Sessions do not expire loaded objects on commit, so aggregates returned
    from a use case stay readable after its transaction ends.
    """
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


def get_engine() -> AsyncEngine:
    """Get the database engine (singleton).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    Also creates and caches the sessionmaker for efficient session creation.

    Returns:
        Configured async engine
    """
    global _engine, _sessionmaker
    if _engine is None:
        with _engine_lock:
            # Double-check after acquiring lock
            if _engine is None:
                _engine = create_engine(get_database_settings(), probe=_probe)
                _sessionmaker = create_sessionmaker(_engine)
    return _engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a session bound to the shared engine.

    The session does NOT auto-commit. Callers manage transactions with
    `async with session.begin()`, which the application services do.

    Usage:
        async for session in get_session():
            service = get_conversation_service(session)
            await service.send_message(...)

    Yields:
        AsyncSession for database operations
    """
    get_engine()
    assert _sessionmaker is not None

    async with _sessionmaker() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose the shared engine.

    Resets the sessionmaker as well so the next call to get_engine()
    builds a new engine.
    """
    global _engine, _sessionmaker

    if _engine is not None:
        await dispose_engine(_engine, probe=_probe)
        _engine = None
        _sessionmaker = None
