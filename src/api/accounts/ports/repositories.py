"""Repository protocols (ports) for the accounts bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Transaction boundaries belong to the caller (the application
service), not to the repository.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from accounts.domain.aggregates import User


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    Users are create-only, so there is no update or delete.
    """

    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by their username.

        Args:
            username: The exact username to look up

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def add(self, username: str, display_name: str, password_hash: str) -> User:
        """Insert a new user row.

        The store assigns the id and creation timestamp.

        Args:
            username: Unique login identifier
            display_name: Human-readable label
            password_hash: Output of the password hasher

        Returns:
            The created User aggregate with id and created_at populated

        Raises:
            DuplicateUsernameError: If the username's unique constraint is violated
        """
        ...
