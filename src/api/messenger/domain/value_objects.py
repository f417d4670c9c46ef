"""Value objects for the Messenger domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass

from ulid import ULID

from shared_kernel.identity import IdGenerator, default_id_generator


@dataclass(frozen=True)
class UserId:
    """Identifier for a User.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls, id_generator: IdGenerator | None = None) -> UserId:
        """Generate a new UserId.

        Args:
            id_generator: Optional generator; ULID-based when omitted

        Returns:
            A new UserId
        """
        generator = id_generator or default_id_generator()
        return cls(value=generator.new_id())

    @classmethod
    def from_string(cls, value: str) -> UserId:
        """Create UserId from string value.

        Args:
            value: ULID string

        Returns:
            UserId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid UserId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class ConversationId:
    """Identifier for a Conversation aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls, id_generator: IdGenerator | None = None) -> ConversationId:
        """Generate a new ConversationId.

        Args:
            id_generator: Optional generator; ULID-based when omitted

        Returns:
            A new ConversationId
        """
        generator = id_generator or default_id_generator()
        return cls(value=generator.new_id())

    @classmethod
    def from_string(cls, value: str) -> ConversationId:
        """Create ConversationId from string value.

        Args:
            value: ULID string

        Returns:
            ConversationId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid ConversationId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class MessageId:
    """Identifier for a Message within a conversation."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls, id_generator: IdGenerator | None = None) -> MessageId:
        """Generate a new MessageId."""
        generator = id_generator or default_id_generator()
        return cls(value=generator.new_id())

    @classmethod
    def from_string(cls, value: str) -> MessageId:
        """Create MessageId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid MessageId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class Address:
    """Postal address owned by a User.

    Unlike identifiers, addresses compare structurally: two addresses with
    the same street, city and country are the same address.
    """

    street: str
    city: str
    country: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.street}, {self.city}, {self.country}"
