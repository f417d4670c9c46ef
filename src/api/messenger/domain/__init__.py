"""Domain layer for the Messenger bounded context."""
