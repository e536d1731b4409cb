"""Database-specific exceptions for the credential store."""


class DatabaseError(Exception):
    """Base exception for database handle operations."""

    pass


class DatabaseNotOpenError(DatabaseError):
    """Raised when a session is requested from a handle that is not open."""

    pass
