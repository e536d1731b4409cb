"""Account application service for the accounts bounded context.

Orchestrates username uniqueness checks, password hashing, and user
creation for sign-up, and lookup plus hash comparison for login.
"""

from __future__ import annotations

import asyncio

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.application.observability import (
    AccountServiceProbe,
    DefaultAccountServiceProbe,
)
from accounts.application.security import BcryptPasswordHasher
from accounts.application.value_objects import PublicUser, RegisteredUser
from accounts.ports.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    StoreUnavailableError,
)
from accounts.ports.repositories import IUserRepository
from accounts.ports.security import PasswordHasher

# Failures of the credential store itself, as opposed to domain outcomes.
_STORE_ERRORS = (SQLAlchemyError, OSError)


def _describe(error: Exception) -> str:
    """Summarize an error for logging without SQL text or bound parameters."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        return f"{type(error).__name__}: {error.orig}"
    if isinstance(error, OSError):
        return f"{type(error).__name__}: {error}"
    return type(error).__name__


class AccountService:
    """Application service for account registration and login.

    Stateless between calls; all shared state lives in the credential
    store. Manages database transactions. Hashing runs in a worker
    thread so the deliberately slow bcrypt rounds do not block the
    event loop.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        password_hasher: PasswordHasher | None = None,
        probe: AccountServiceProbe | None = None,
    ):
        """Initialize AccountService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            password_hasher: Optional hasher (defaults to bcrypt)
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._session = session
        self._hasher = password_hasher or BcryptPasswordHasher()
        self._probe = probe or DefaultAccountServiceProbe()

    async def register_account(
        self, username: str, display_name: str, password: str
    ) -> RegisteredUser:
        """Create a new account.

        Length rules for the inputs are the caller's responsibility; the
        service does not re-validate them.

        Args:
            username: Unique login identifier
            display_name: Human-readable label
            password: Plaintext password (hashed before storage)

        Returns:
            The public projection of the created user, including created_at

        Raises:
            DuplicateUsernameError: If the username is already taken, including
                when a concurrent registration wins the race to insert it
            StoreUnavailableError: If the credential store fails
        """
        try:
            async with self._session.begin():
                existing = await self._user_repository.get_by_username(username)
                if existing is not None:
                    raise DuplicateUsernameError(f"Username '{username}' already exists")

            password_hash = await asyncio.to_thread(self._hasher.hash, password)

            # The unique index is the real guard; add() maps its violation
            # to DuplicateUsernameError.
            async with self._session.begin():
                user = await self._user_repository.add(
                    username=username,
                    display_name=display_name,
                    password_hash=password_hash,
                )

        except DuplicateUsernameError:
            self._probe.registration_rejected(username=username)
            raise
        except _STORE_ERRORS as e:
            self._probe.registration_failed(username=username, error=_describe(e))
            raise StoreUnavailableError("Error creating user") from e
        except Exception as e:
            self._probe.registration_failed(username=username, error=_describe(e))
            raise

        self._probe.account_registered(user_id=user.id.value, username=username)
        return RegisteredUser.from_user(user)

    async def verify_credentials(self, username: str, password: str) -> PublicUser:
        """Check a username/password pair.

        An unknown username still costs one bcrypt computation, so the
        two rejection cases take comparable time as well as producing
        the same error.

        Args:
            username: Login identifier
            password: Plaintext password to check

        Returns:
            The public projection of the user (without created_at)

        Raises:
            InvalidCredentialsError: If the user does not exist or the password
                does not match (the two cases are indistinguishable)
            StoreUnavailableError: If the credential store fails
        """
        try:
            async with self._session.begin():
                user = await self._user_repository.get_by_username(username)

            if user is None:
                await asyncio.to_thread(self._hasher.hash, password)
                matched = False
            else:
                matched = await asyncio.to_thread(
                    self._hasher.verify, password, user.password_hash
                )
        except _STORE_ERRORS as e:
            self._probe.credential_verification_failed(
                username=username, error=_describe(e)
            )
            raise StoreUnavailableError("Error verifying user") from e
        except Exception as e:
            self._probe.credential_verification_failed(
                username=username, error=_describe(e)
            )
            raise

        if user is None or not matched:
            self._probe.credential_verification_rejected(username=username)
            raise InvalidCredentialsError()

        self._probe.credentials_verified(user_id=user.id.value, username=username)
        return PublicUser.from_user(user)
