"""Integration test fixtures for credential store tests.

These fixtures require a running PostgreSQL instance.
"""

from collections.abc import AsyncGenerator
import os

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text

from accounts.infrastructure.models import UserModel  # noqa: F401
from infrastructure.database import Database
from infrastructure.settings import DatabaseSettings


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        CLIMATEINSIGHT_DB_HOST, CLIMATEINSIGHT_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("CLIMATEINSIGHT_DB_HOST", "localhost"),
        port=int(os.getenv("CLIMATEINSIGHT_DB_PORT", "5432")),
        database=os.getenv("CLIMATEINSIGHT_DB_DATABASE", "climateinsight"),
        username=os.getenv("CLIMATEINSIGHT_DB_USERNAME", "climateinsight"),
        password=SecretStr(
            os.getenv("CLIMATEINSIGHT_DB_PASSWORD", "climateinsight_dev_password")
        ),
    )


@pytest_asyncio.fixture
async def database(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[Database, None]:
    """Provide an open handle with an empty users table."""
    async with Database(integration_db_settings) as database:
        await database.create_schema()
        async with database.engine.begin() as conn:
            await conn.execute(text("TRUNCATE users RESTART IDENTITY"))
        yield database
