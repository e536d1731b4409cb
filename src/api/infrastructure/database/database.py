"""Explicit database handle for the credential store.

A ``Database`` owns one async engine and its session factory. It is
constructed by the application (or a test) and passed to whoever needs it,
with an explicit open/close lifecycle:

    async with Database(settings) as db:
        async with db.session() as session:
            ...

Nothing here is cached at module level, so several handles (e.g. one per
test) can coexist in the same process.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Callable

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine
from infrastructure.database.exceptions import DatabaseError, DatabaseNotOpenError
from infrastructure.database.models import Base
from infrastructure.observability.probes import DatabaseProbe, DefaultDatabaseProbe

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings


class Database:
    """Scoped owner of the credential store engine and session factory."""

    def __init__(
        self,
        settings: DatabaseSettings,
        probe: DatabaseProbe | None = None,
        engine_factory: Callable[[DatabaseSettings], AsyncEngine] = create_engine,
    ) -> None:
        """Initialize an unopened handle.

        Args:
            settings: Database connection settings
            probe: Optional domain probe for observability
            engine_factory: Builds the engine on open (overridable for tests)
        """
        self._settings = settings
        self._probe = probe or DefaultDatabaseProbe()
        self._engine_factory = engine_factory
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_open(self) -> bool:
        """Whether the engine has been created and not yet disposed."""
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        """The underlying engine.

        Raises:
            DatabaseNotOpenError: If the handle is not open
        """
        if self._engine is None:
            raise DatabaseNotOpenError("Database handle is not open")
        return self._engine

    async def open(self) -> None:
        """Create the engine and session factory. No-op if already open.

        Raises:
            DatabaseError: If the engine cannot be created
        """
        if self._engine is not None:
            return

        try:
            engine = self._engine_factory(self._settings)
        except Exception as e:
            self._probe.database_open_failed(self._settings.connection_string, e)
            raise DatabaseError(f"Failed to open database: {e}") from e

        self._engine = engine
        self._sessionmaker = async_sessionmaker(
            engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        self._probe.database_opened(
            self._settings.connection_string, self._settings.pool_size
        )

    async def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self._engine is None:
            return

        engine = self._engine
        self._engine = None
        self._sessionmaker = None
        await engine.dispose()
        self._probe.database_closed()

    async def __aenter__(self) -> Database:
        await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide a session that is closed when the block exits.

        The session does NOT auto-commit. Callers manage transactions
        with ``async with session.begin()``.

        Raises:
            DatabaseNotOpenError: If the handle is not open
        """
        if self._sessionmaker is None:
            raise DatabaseNotOpenError("Database handle is not open")

        async with self._sessionmaker() as session:
            yield session

    async def ping(self) -> bool:
        """Check connectivity with a trivial query.

        Returns:
            True if the database answered, False otherwise
        """
        engine = self.engine
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            self._probe.health_check_failed(e)
            return False
        return True

    async def create_schema(self) -> None:
        """Create any missing tables registered on the declarative base.

        Intended for development; production schemas are managed by Alembic.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self._probe.schema_created(sorted(Base.metadata.tables))
