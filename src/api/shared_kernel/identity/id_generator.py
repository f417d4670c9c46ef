"""Identifier generation shared across bounded contexts.

Aggregates never reach for a global source of identifiers. Instead, the
caller hands in an IdGenerator so that production code can use ULIDs and
tests can supply fixed, predictable values.

This is part of the Shared Kernel - changes here affect multiple contexts.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ulid import ULID


@runtime_checkable
class IdGenerator(Protocol):
    """Capability for producing new string identifiers."""

    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...


class UlidIdGenerator:
    """Generates ULID identifiers.

    ULIDs are lexicographically sortable by creation time and can be
    generated without coordination, which makes them suitable as primary
    keys assigned before the aggregate is persisted.

    Example:
        >>> gen = UlidIdGenerator()
        >>> len(gen.new_id())
        26
    """

    def new_id(self) -> str:
        """Generate a new ULID string."""
        return str(ULID())


_default_generator = UlidIdGenerator()


def default_id_generator() -> IdGenerator:
    """Return the process-wide default generator (ULID based)."""
    return _default_generator
