"""FastAPI dependency providers for the accounts bounded context."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.application.observability import (
    AccountServiceProbe,
    DefaultAccountServiceProbe,
)
from accounts.application.security import BcryptPasswordHasher
from accounts.application.services import AccountService
from accounts.infrastructure.observability import DefaultUserRepositoryProbe
from accounts.infrastructure.user_repository import UserRepository
from accounts.ports.security import PasswordHasher
from infrastructure.database.dependencies import get_session
from infrastructure.observability import ObservationContext


def get_observation_context(request: Request) -> ObservationContext:
    """Build the observation context for the current request.

    Uses the caller-supplied X-Request-ID header when present.
    """
    return ObservationContext(
        request_id=request.headers.get("X-Request-ID"),
        client_host=request.client.host if request.client else None,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher (stateless, safe to share)."""
    return BcryptPasswordHasher()


def get_account_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> AccountServiceProbe:
    """Get AccountServiceProbe bound to the request's observation context."""
    return DefaultAccountServiceProbe().with_context(context)


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session
        context: Request observation context

    Returns:
        UserRepository bound to the request session
    """
    return UserRepository(
        session=session,
        probe=DefaultUserRepositoryProbe().with_context(context),
    )


def get_account_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    probe: Annotated[AccountServiceProbe, Depends(get_account_service_probe)],
) -> AccountService:
    """Get AccountService instance.

    The repository and the service share the same request session, so
    the service's transaction covers the repository's statements.
    """
    return AccountService(
        user_repository=user_repository,
        session=session,
        password_hasher=password_hasher,
        probe=probe,
    )
