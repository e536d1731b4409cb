"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI

from accounts.presentation import routes as account_routes
from infrastructure.database import Database
from infrastructure.database.dependencies import get_database
from infrastructure.logging import configure_logging
from infrastructure.settings import get_database_settings, get_settings
from infrastructure.version import __version__


@asynccontextmanager
async def climateinsight_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - The credential store handle (opened on startup, closed on shutdown)
    """
    configure_logging(debug=get_settings().debug)
    db_settings = get_database_settings()

    async with Database(db_settings) as database:
        if db_settings.create_schema:
            await database.create_schema()
        app.state.database = database
        yield


app = FastAPI(
    title=get_settings().app_name,
    description="Account registration and login for the ClimateInsight dashboard",
    version=__version__,
    lifespan=climateinsight_lifespan,
)

app.include_router(account_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    database: Annotated[Database, Depends(get_database)],
) -> dict:
    """Check credential store connectivity."""
    connected = await database.ping()
    return {
        "status": "ok" if connected else "unhealthy",
        "connected": connected,
    }
