"""Application-layer value objects for the accounts bounded context.

These are the public projections of a User: the only shapes in which
account data leaves the application service. Neither carries the
password hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.aggregates import User


@dataclass(frozen=True)
class PublicUser:
    """Projection returned by a successful login."""

    id: int
    username: str
    display_name: str

    @classmethod
    def from_user(cls, user: User) -> PublicUser:
        return cls(
            id=user.id.value,
            username=user.username,
            display_name=user.display_name,
        )


@dataclass(frozen=True)
class RegisteredUser(PublicUser):
    """Projection returned by a successful registration.

    Unlike the login projection it includes the creation timestamp.
    """

    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> RegisteredUser:
        return cls(
            id=user.id.value,
            username=user.username,
            display_name=user.display_name,
            created_at=user.created_at,
        )
