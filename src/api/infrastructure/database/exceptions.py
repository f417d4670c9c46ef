"""Database-specific exceptions shared by repositories."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when database connection fails."""

    pass


class SchemaError(DatabaseError):
    """Raised when the schema cannot be created or dropped."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
