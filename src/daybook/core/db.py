"""Database engine, session factory and storage error translation."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.daybook.core.config import get_settings
from src.daybook.core.exceptions import StorageUnavailable
from src.daybook.core.logging import get_logger

logger = get_logger(__name__)

_engine: AsyncEngine | None = None

# Errors that mean "the database is unreachable or too slow", as opposed to
# integrity or programming errors which must propagate unchanged.
STORAGE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


def _get_engine_kwargs() -> dict[str, Any]:
    settings = get_settings()
    kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if settings.database_url.startswith("postgresql"):
        kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
            connect_args={"command_timeout": settings.database_command_timeout},
        )
    return kwargs


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(settings.database_url, **_get_engine_kwargs())
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Create a database session.

    Args:
        engine: Optional engine override for testing.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@asynccontextmanager
async def storage_errors(session: AsyncSession | None = None) -> AsyncGenerator[None]:
    """Translate connectivity failures into StorageUnavailable.

    The session, if given, is rolled back so the caller can retry on a
    clean transaction.
    """
    try:
        yield
    except STORAGE_ERRORS as e:
        if session is not None:
            try:
                await session.rollback()
            except STORAGE_ERRORS:
                logger.warning("Rollback failed after storage error")
        logger.warning("Database unavailable", error=str(e))
        raise StorageUnavailable("Database is temporarily unavailable") from e
