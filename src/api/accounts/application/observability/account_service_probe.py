"""Protocol for account application service observability.

Defines the interface for domain probes that capture application-level
domain events for registration and login. No probe method accepts a
password or hash.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class AccountServiceProbe(Protocol):
    """Domain probe for account application service operations."""

    def account_registered(self, user_id: int, username: str) -> None:
        """Record that a new account was created."""
        ...

    def registration_rejected(self, username: str) -> None:
        """Record that registration was refused because the username is taken."""
        ...

    def registration_failed(self, username: str, error: str) -> None:
        """Record that registration failed on an infrastructure error."""
        ...

    def credentials_verified(self, user_id: int, username: str) -> None:
        """Record a successful login."""
        ...

    def credential_verification_rejected(self, username: str) -> None:
        """Record a failed login (unknown user or wrong password, not distinguished)."""
        ...

    def credential_verification_failed(self, username: str, error: str) -> None:
        """Record that a login could not be checked because of an infrastructure error."""
        ...

    def with_context(self, context: ObservationContext) -> AccountServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccountServiceProbe:
    """Default implementation of AccountServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAccountServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccountServiceProbe(logger=self._logger, context=context)

    def account_registered(self, user_id: int, username: str) -> None:
        self._logger.info(
            "account_registered",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def registration_rejected(self, username: str) -> None:
        self._logger.info(
            "registration_rejected",
            username=username,
            reason="duplicate_username",
            **self._get_context_kwargs(),
        )

    def registration_failed(self, username: str, error: str) -> None:
        self._logger.error(
            "registration_failed",
            username=username,
            error=error,
            **self._get_context_kwargs(),
        )

    def credentials_verified(self, user_id: int, username: str) -> None:
        self._logger.info(
            "credentials_verified",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def credential_verification_rejected(self, username: str) -> None:
        self._logger.warning(
            "credential_verification_rejected",
            username=username,
            reason="invalid_credentials",
            **self._get_context_kwargs(),
        )

    def credential_verification_failed(self, username: str, error: str) -> None:
        self._logger.error(
            "credential_verification_failed",
            username=username,
            error=error,
            **self._get_context_kwargs(),
        )
