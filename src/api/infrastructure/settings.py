"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Credential store connection settings.

    Environment variables:
        CLIMATEINSIGHT_DB_HOST: Database host (default: localhost)
        CLIMATEINSIGHT_DB_PORT: Database port (default: 5432)
        CLIMATEINSIGHT_DB_DATABASE: Database name (default: climateinsight)
        CLIMATEINSIGHT_DB_USERNAME: Database user (default: climateinsight)
        CLIMATEINSIGHT_DB_PASSWORD: Database password (required in production)
        CLIMATEINSIGHT_DB_POOL_SIZE: Connections kept in the pool (default: 5)
        CLIMATEINSIGHT_DB_POOL_MAX_OVERFLOW: Extra connections beyond pool_size (default: 0)
        CLIMATEINSIGHT_DB_CREATE_SCHEMA: Create tables on startup (default: false)
        CLIMATEINSIGHT_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="CLIMATEINSIGHT_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="climateinsight", description="Database name")
    username: str = Field(default="climateinsight", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_size: int = Field(
        default=5,
        description="Connections kept in the pool",
        ge=1,
        le=100,
    )
    pool_max_overflow: int = Field(
        default=0,
        description="Connections allowed beyond pool_size",
        ge=0,
        le=100,
    )
    create_schema: bool = Field(
        default=False,
        description="Create missing tables on startup (development only)",
    )
    echo: bool = Field(default=False, description="Log emitted SQL")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class Settings(BaseSettings):
    """Application-wide settings; database settings are loaded separately."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="ClimateInsight API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()
