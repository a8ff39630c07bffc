"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
Secrets (database password) should be provided via environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Bind address for the HTTP server",
    )
    port: int = Field(
        default=8080,
        description="Port for the HTTP server",
    )

    # =========================================================================
    # Database
    # =========================================================================
    db_url: str | None = Field(
        default=None,
        description="Full async SQLAlchemy URL; overrides the db_* parts when set",
    )
    db_user: str = Field(
        default="inventory_app",
        description="Database user",
    )
    db_password: str = Field(
        default="",
        description="Database password",
    )
    db_name: str = Field(
        default="inventory",
        description="Database name",
    )
    db_host: str = Field(
        default="localhost",
        description="Database host",
    )
    db_port: int = Field(
        default=5432,
        description="Database port",
    )
    db_pool_size: int = Field(
        default=5,
        description="Database connection pool size",
    )
    db_pool_max_overflow: int = Field(
        default=10,
        description="Max overflow connections beyond pool size",
    )
    db_create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )
    seed_demo_data: bool = Field(
        default=False,
        description="Insert demo products on startup when the table is empty",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Build the database URL.

        An explicit ``db_url`` wins (e.g. ``sqlite+aiosqlite:///./inventory.db``
        for local runs). Otherwise a PostgreSQL URL is assembled from parts.
        """
        if self.db_url:
            return self.db_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================================================================
    # HTTP
    # =========================================================================
    cors_origin: str = Field(
        default="http://localhost:4200",
        description="The single frontend origin allowed to call the API",
    )
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL the client consumers call",
    )
    client_timeout: float = Field(
        default=10.0,
        description="Client consumer request timeout in seconds",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON outside the dev environment",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
