"""Integration test fixtures for database tests.

Each test runs against its own in-memory SQLite database with the full
schema created, so no external services are needed. Point the suite at
PostgreSQL instead by setting MESSENGER_TEST_DB_BACKEND=postgresql together
with the usual MESSENGER_DB_* variables.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.dependencies import create_sessionmaker
from infrastructure.database.engines import (
    create_engine,
    dispose_engine,
    verify_connection,
)
from infrastructure.database.schema import create_schema, drop_schema
from infrastructure.settings import DatabaseSettings

# Registers the Messenger tables on Base.metadata before create_schema()
import messenger.infrastructure.models  # noqa: F401


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests (in-memory SQLite by default)."""
    backend = os.getenv("MESSENGER_TEST_DB_BACKEND", "sqlite")
    if backend == "sqlite":
        return DatabaseSettings(backend="sqlite", sqlite_path=":memory:")
    return DatabaseSettings(backend="postgresql")


@pytest_asyncio.fixture
async def async_engine(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """Engine with a freshly created schema, dropped again after the test."""
    engine = create_engine(integration_db_settings)
    await verify_connection(engine)
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await dispose_engine(engine)


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessionmaker bound to the test engine.

    Open a new session per unit of work: once a session has autobegun a
    transaction by reading, session.begin() can no longer be used on it.
    """
    return create_sessionmaker(async_engine)
