"""Infrastructure layer for the Messenger bounded context."""
