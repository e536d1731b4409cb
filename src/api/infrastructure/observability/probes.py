"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DatabaseProbe(Protocol):
    """Domain probe for credential store lifecycle observability.

    This probe captures domain-significant events related to the database
    handle without exposing logging implementation details.
    """

    def database_opened(self, connection_string: str, pool_size: int) -> None:
        """Record that the engine was created and the handle is usable."""
        ...

    def database_open_failed(self, connection_string: str, error: Exception) -> None:
        """Record that creating the engine failed."""
        ...

    def database_closed(self) -> None:
        """Record that the engine was disposed."""
        ...

    def schema_created(self, tables: list[str]) -> None:
        """Record that missing tables were created."""
        ...

    def health_check_failed(self, error: Exception) -> None:
        """Record that a connectivity check failed."""
        ...

    def with_context(self, context: ObservationContext) -> DatabaseProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDatabaseProbe:
    """Default implementation of DatabaseProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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

    def with_context(self, context: ObservationContext) -> DefaultDatabaseProbe:
        """Create a new probe with observation context bound."""
        return DefaultDatabaseProbe(logger=self._logger, context=context)

    def database_opened(self, connection_string: str, pool_size: int) -> None:
        self._logger.info(
            "database_opened",
            connection_string=connection_string,
            pool_size=pool_size,
            **self._get_context_kwargs(),
        )

    def database_open_failed(self, connection_string: str, error: Exception) -> None:
        self._logger.error(
            "database_open_failed",
            connection_string=connection_string,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def database_closed(self) -> None:
        self._logger.info(
            "database_closed",
            **self._get_context_kwargs(),
        )

    def schema_created(self, tables: list[str]) -> None:
        self._logger.info(
            "schema_created",
            tables=tables,
            **self._get_context_kwargs(),
        )

    def health_check_failed(self, error: Exception) -> None:
        self._logger.warning(
            "database_health_check_failed",
            error=str(error),
            **self._get_context_kwargs(),
        )
