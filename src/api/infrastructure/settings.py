"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        MESSENGER_DB_BACKEND: "postgresql" or "sqlite" (default: postgresql)
        MESSENGER_DB_HOST: Database host (default: localhost)
        MESSENGER_DB_PORT: Database port (default: 5432)
        MESSENGER_DB_DATABASE: Database name (default: messenger)
        MESSENGER_DB_USERNAME: Database user (default: messenger)
        MESSENGER_DB_PASSWORD: Database password (required in production)
        MESSENGER_DB_SQLITE_PATH: SQLite file, ":memory:" for in-memory (default)
        MESSENGER_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        MESSENGER_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        MESSENGER_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="MESSENGER_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["postgresql", "sqlite"] = Field(
        default="postgresql",
        description="Database backend",
    )
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="messenger", description="Database name")
    username: str = Field(default="messenger", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    sqlite_path: str = Field(
        default=":memory:",
        description="SQLite database file (sqlite backend only)",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the sqlite backend is selected."""
        return self.backend == "sqlite"

    @property
    def is_in_memory(self) -> bool:
        """Whether the database lives only in process memory."""
        return self.is_sqlite and self.sqlite_path in ("", ":memory:")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        if self.is_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="MESSENGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Messenger", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()
