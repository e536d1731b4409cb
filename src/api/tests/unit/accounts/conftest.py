"""Shared fixtures for accounts unit tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from accounts.domain.aggregates import User
from accounts.domain.value_objects import UserId
from accounts.ports.exceptions import DuplicateUsernameError


class _Transaction:
    async def __aenter__(self) -> _Transaction:
        return self

    async def __aexit__(self, *exc_info: object) -> bool:
        return False


class FakeSession:
    """Stands in for AsyncSession where only begin() is used."""

    def __init__(self) -> None:
        self.transactions = 0

    def begin(self) -> _Transaction:
        self.transactions += 1
        return _Transaction()


class InMemoryUserRepository:
    """IUserRepository backed by a dict.

    add() enforces username uniqueness the way the unique index does.
    """

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self._next_id = 1

    async def get_by_username(self, username: str) -> User | None:
        return self.users.get(username)

    async def add(self, username: str, display_name: str, password_hash: str) -> User:
        if username in self.users:
            raise DuplicateUsernameError(f"Username '{username}' already exists")

        user = User(
            id=UserId(value=self._next_id),
            username=username,
            display_name=display_name,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self.users[username] = user
        return user


def make_user(
    user_id: int = 1,
    username: str = "alice",
    display_name: str = "Alice A",
    password_hash: str = "$2b$12$storedhash",
) -> User:
    return User(
        id=UserId(value=user_id),
        username=username,
        display_name=display_name,
        password_hash=password_hash,
        created_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def in_memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def existing_user() -> User:
    return make_user()
