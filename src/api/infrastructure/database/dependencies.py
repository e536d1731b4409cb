"""Database dependency injection for FastAPI.

The application lifespan opens a single ``Database`` handle and stores it
on ``app.state``; these dependencies hand it (or a session from it) to
request handlers.
"""

from __future__ import annotations

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.database import Database


def get_database(request: Request) -> Database:
    """Return the database handle opened by the application lifespan."""
    return request.app.state.database


async def get_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session for the duration of one request.

    The session is configured to NOT auto-commit. Callers must explicitly
    manage transactions using `async with session.begin()`.

    Yields:
        AsyncSession for database operations
    """
    async with database.session() as session:
        yield session
