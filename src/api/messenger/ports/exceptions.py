"""Port-level exceptions for the Messenger bounded context.

These exceptions represent errors that occur while resolving identities or
loading aggregates. They should be caught and handled by whatever sits on
top of the application layer.
"""


class UserNotFoundError(Exception):
    """Raised when an identifier does not resolve to a known user."""

    pass


class ConversationNotFoundError(Exception):
    """Raised when a conversation cannot be found."""

    pass


class DuplicateEmailError(Exception):
    """Raised when registering a user with an email that is already taken.

    This exception indicates that the business rule of globally unique
    emails has been violated.
    """

    pass
