"""User aggregate for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from accounts.domain.value_objects import UserId


@dataclass(frozen=True)
class User:
    """A registered account holder.

    Users are create-only: the credential store assigns ``id`` and
    ``created_at`` on insert and nothing updates or deletes them afterwards.

    ``password_hash`` is excluded from ``repr`` so the aggregate can be
    logged or shown in tracebacks without leaking it.
    """

    id: UserId
    username: str
    display_name: str
    password_hash: str = field(repr=False)
    created_at: datetime

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.username})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
