"""Unit tests for the explicit Database handle.

The engine factory is replaced with mocks so no PostgreSQL server is
needed; one test uses the real factory since creating an engine does
not connect.
"""

from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database import Database, DatabaseError, DatabaseNotOpenError
from infrastructure.observability import DatabaseProbe


@pytest.fixture
def mock_probe():
    return create_autospec(DatabaseProbe, instance=True)


@pytest.fixture
def mock_engine():
    engine = MagicMock()
    engine.dispose = AsyncMock()
    return engine


@pytest.fixture
def database(mock_db_settings, mock_probe, mock_engine):
    return Database(
        mock_db_settings,
        probe=mock_probe,
        engine_factory=lambda settings: mock_engine,
    )


def _async_context(value):
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=value)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


class TestDatabaseLifecycle:
    """Tests for open/close."""

    def test_starts_closed(self, database):
        assert database.is_open is False

    def test_engine_unavailable_before_open(self, database):
        with pytest.raises(DatabaseNotOpenError):
            database.engine

    @pytest.mark.asyncio
    async def test_open_creates_engine(self, database, mock_engine, mock_probe):
        """Opening builds the engine and records the event."""
        await database.open()

        assert database.is_open is True
        assert database.engine is mock_engine
        mock_probe.database_opened.assert_called_once_with(
            "postgresql://testuser@testhost:5432/testdb", 3
        )

    @pytest.mark.asyncio
    async def test_open_is_idempotent(self, mock_db_settings, mock_engine):
        factory = MagicMock(return_value=mock_engine)
        database = Database(mock_db_settings, engine_factory=factory)

        await database.open()
        await database.open()

        factory.assert_called_once_with(mock_db_settings)

    @pytest.mark.asyncio
    async def test_open_failure_raises_database_error(
        self, mock_db_settings, mock_probe
    ):
        """A failing engine factory surfaces as DatabaseError."""
        cause = ValueError("bad url")
        database = Database(
            mock_db_settings,
            probe=mock_probe,
            engine_factory=MagicMock(side_effect=cause),
        )

        with pytest.raises(DatabaseError) as exc_info:
            await database.open()

        assert exc_info.value.__cause__ is cause
        assert database.is_open is False
        mock_probe.database_open_failed.assert_called_once_with(
            "postgresql://testuser@testhost:5432/testdb", cause
        )

    @pytest.mark.asyncio
    async def test_close_disposes_engine(self, database, mock_engine, mock_probe):
        await database.open()
        await database.close()

        assert database.is_open is False
        mock_engine.dispose.assert_awaited_once()
        mock_probe.database_closed.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, database, mock_engine, mock_probe):
        await database.open()
        await database.close()
        await database.close()

        mock_engine.dispose.assert_awaited_once()
        mock_probe.database_closed.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_without_open_is_noop(self, database, mock_engine):
        await database.close()
        mock_engine.dispose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_async_context_manager(self, database, mock_engine):
        """The handle is open inside the block and closed after it."""
        async with database as db:
            assert db is database
            assert db.is_open is True

        assert database.is_open is False
        mock_engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_handles_are_independent(self, mock_db_settings):
        """Two handles in one process do not share state."""
        first = Database(mock_db_settings, engine_factory=lambda s: MagicMock())
        second = Database(mock_db_settings, engine_factory=lambda s: MagicMock())

        await first.open()

        assert first.is_open is True
        assert second.is_open is False


class TestDatabaseSessions:
    """Tests for session()."""

    @pytest.mark.asyncio
    async def test_session_before_open_raises(self, database):
        with pytest.raises(DatabaseNotOpenError):
            async with database.session():
                pass

    @pytest.mark.asyncio
    async def test_session_after_close_raises(self, database):
        await database.open()
        await database.close()

        with pytest.raises(DatabaseNotOpenError):
            async with database.session():
                pass

    @pytest.mark.asyncio
    async def test_session_yields_async_session(self, mock_db_settings):
        """With the real engine factory, sessions are AsyncSession objects."""
        async with Database(mock_db_settings) as database:
            async with database.session() as session:
                assert isinstance(session, AsyncSession)


class TestDatabasePing:
    """Tests for the connectivity check."""

    @pytest.mark.asyncio
    async def test_ping_returns_true_when_database_answers(
        self, database, mock_engine
    ):
        conn = AsyncMock()
        mock_engine.connect.return_value = _async_context(conn)
        await database.open()

        assert await database.ping() is True
        conn.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ping_returns_false_on_store_error(
        self, database, mock_engine, mock_probe
    ):
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        mock_engine.connect.side_effect = error
        await database.open()

        assert await database.ping() is False
        mock_probe.health_check_failed.assert_called_once_with(error)

    @pytest.mark.asyncio
    async def test_ping_returns_false_on_network_error(
        self, database, mock_engine, mock_probe
    ):
        mock_engine.connect.side_effect = ConnectionRefusedError("refused")
        await database.open()

        assert await database.ping() is False
        mock_probe.health_check_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_ping_before_open_raises(self, database):
        with pytest.raises(DatabaseNotOpenError):
            await database.ping()


class TestCreateSchema:
    """Tests for development schema creation."""

    @pytest.mark.asyncio
    async def test_creates_registered_tables(self, database, mock_engine, mock_probe):
        from accounts.infrastructure.models import UserModel  # noqa: F401
        from infrastructure.database.models import Base

        conn = AsyncMock()
        mock_engine.begin.return_value = _async_context(conn)
        await database.open()

        await database.create_schema()

        conn.run_sync.assert_awaited_once_with(Base.metadata.create_all)
        tables = mock_probe.schema_created.call_args[0][0]
        assert "users" in tables
