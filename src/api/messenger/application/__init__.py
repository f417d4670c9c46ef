"""Application layer for the Messenger bounded context."""
