"""User aggregate for the Messenger context."""

from __future__ import annotations

from dataclasses import dataclass

from messenger.domain.value_objects import Address, UserId
from shared_kernel.identity import IdGenerator


@dataclass(frozen=True)
class User:
    """User aggregate representing a person who can take part in conversations.

    Conversations only ever hold a user's identifier, never the record itself.
    Two User objects describe the same person whenever their ids match, even
    if one of them carries a stale email or address.

    Credentials are not modelled here.
    """

    id: UserId
    email: str
    address: Address | None = None

    @classmethod
    def register(
        cls,
        email: str,
        address: Address | None = None,
        id_generator: IdGenerator | None = None,
    ) -> "User":
        """Factory method for a newly registered user.

        Args:
            email: Contact email, unique across users
            address: Optional postal address
            id_generator: Optional identifier source (ULID by default)

        Returns:
            A new User with a generated id
        """
        return cls(
            id=UserId.generate(id_generator),
            email=email,
            address=address,
        )

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
