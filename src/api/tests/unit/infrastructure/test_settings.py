"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import DatabaseSettings, Settings


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20

    def test_pool_settings_from_fields(self):
        """Should accept pool settings via constructor."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=15)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 15

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        """Should allow max == min."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        """Pool min connections must be >= 1."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        """Pool max should not exceed reasonable limit."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)


class TestDatabaseSettingsBackend:
    """Tests for backend selection."""

    def test_defaults_to_postgresql(self, monkeypatch):
        monkeypatch.delenv("MESSENGER_DB_BACKEND", raising=False)
        settings = DatabaseSettings()

        assert settings.backend == "postgresql"
        assert settings.is_sqlite is False
        assert settings.is_in_memory is False

    def test_rejects_unknown_backend(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(backend="oracle")

    def test_sqlite_defaults_to_memory(self):
        settings = DatabaseSettings(backend="sqlite")

        assert settings.is_sqlite is True
        assert settings.is_in_memory is True

    def test_sqlite_file_is_not_in_memory(self):
        settings = DatabaseSettings(backend="sqlite", sqlite_path="/tmp/chat.db")

        assert settings.is_in_memory is False
        assert settings.connection_string == "sqlite:////tmp/chat.db"

    def test_postgres_connection_string_hides_password(self):
        settings = DatabaseSettings(
            host="db.example.com",
            port=5433,
            database="chat",
            username="svc",
            password="s3cret",
        )

        assert settings.connection_string == "postgresql://svc@db.example.com:5433/chat"
        assert "s3cret" not in settings.connection_string

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MESSENGER_DB_BACKEND", "sqlite")
        monkeypatch.setenv("MESSENGER_DB_SQLITE_PATH", "chat.db")

        settings = DatabaseSettings()

        assert settings.is_sqlite is True
        assert settings.sqlite_path == "chat.db"


class TestSettings:
    """Tests for the top-level application settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MESSENGER_DEBUG", raising=False)
        settings = Settings()

        assert settings.app_name == "Messenger"
        assert settings.debug is False

    def test_debug_from_environment(self, monkeypatch):
        monkeypatch.setenv("MESSENGER_DEBUG", "true")

        assert Settings().debug is True
