"""Database infrastructure - shared connection primitives."""

from infrastructure.database.database import Database
from infrastructure.database.exceptions import DatabaseError, DatabaseNotOpenError

__all__ = [
    "Database",
    "DatabaseError",
    "DatabaseNotOpenError",
]
