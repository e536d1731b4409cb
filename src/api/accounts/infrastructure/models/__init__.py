"""SQLAlchemy ORM models for the accounts bounded context.

These models map to database tables and are used by repository implementations.
"""

from accounts.infrastructure.models.user import UserModel

__all__ = [
    "UserModel",
]
