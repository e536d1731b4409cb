"""PostgreSQL implementation of IUserRepository.

Stores account records in the users table. Transaction boundaries are
owned by the calling application service.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domain.aggregates import User
from accounts.domain.value_objects import UserId
from accounts.infrastructure.models import UserModel
from accounts.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from accounts.ports.exceptions import DuplicateUsernameError
from accounts.ports.repositories import IUserRepository

USERNAME_INDEX = "ix_users_username"


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates."""

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by their username.

        Args:
            username: The username to search for

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.username_not_found(username)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def add(self, username: str, display_name: str, password_hash: str) -> User:
        """Insert a new user row and return the stored aggregate.

        Flushes so the generated id and created_at are available and so a
        unique-index violation surfaces here rather than at commit.

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        model = UserModel(
            username=username,
            display_name=display_name,
            password_hash=password_hash,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if USERNAME_INDEX in str(e):
                self._probe.duplicate_username(username)
                raise DuplicateUsernameError(
                    f"Username '{username}' already exists"
                ) from e
            raise

        self._probe.user_added(model.id, username)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserId(value=model.id),
            username=model.username,
            display_name=model.display_name,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
