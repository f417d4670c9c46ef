"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    SchemaError,
)

__all__ = [
    "DatabaseConnectionError",
    "DatabaseError",
    "SchemaError",
]
