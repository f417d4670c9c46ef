"""Domain exceptions for the Messenger bounded context.

Raised by aggregates when a requested mutation is not allowed. Checks always
run before any state changes, so an aggregate is left untouched when one of
these is raised.
"""


class MessengerError(Exception):
    """Base exception for Messenger domain rule violations."""

    pass


class UnauthorizedError(MessengerError):
    """Raised when the acting user lacks permission for a mutation.

    Examples are a non-owner trying to change membership, or a user who is
    neither the owner nor a participant trying to send a message.
    """

    pass


class InvariantViolationError(MessengerError):
    """Raised when a mutation would break a structural invariant.

    Examples are placing the owner among the participants, adding the same
    participant twice, or removing a user who is not a participant.
    """

    pass
