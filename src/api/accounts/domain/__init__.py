"""Domain layer for the accounts bounded context."""
