"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Request-scoped session context manager
- Schema creation and connectivity checks for startup
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inventory.config import settings
from inventory.infra.logging import get_logger
from inventory.models import Base

logger = get_logger(__name__)


# Global engine (initialized lazily on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(url: str) -> dict[str, Any]:
    """Pool options for the given URL.

    SQLite drivers manage their own pool and reject size arguments.
    """
    options: dict[str, Any] = {"echo": settings.debug}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=1800,  # Recycle connections after 30 min
        )
    return options


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        url = settings.database_url
        logger.info(
            "Creating database engine",
            backend=make_url(url).get_backend_name(),
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
        )
        _engine = create_async_engine(url, **_engine_options(url))

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session.

    Commits whatever is still pending on success, rolls back on any error and
    always closes the session.

    Example:
        async with get_db_session() as session:
            result = await session.execute(select(Product))
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e))
        raise

    finally:
        await session.close()


async def init_db() -> None:
    """Create any missing tables."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready", tables=sorted(Base.metadata.tables))


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.debug("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
