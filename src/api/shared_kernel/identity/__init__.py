"""Identifier generation primitives shared across bounded contexts."""

from shared_kernel.identity.id_generator import (
    IdGenerator,
    UlidIdGenerator,
    default_id_generator,
)

__all__ = [
    "IdGenerator",
    "UlidIdGenerator",
    "default_id_generator",
]
