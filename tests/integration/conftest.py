"""Integration test fixtures for database and HTTP client operations.

Tests run against a file-backed SQLite database (via aiosqlite) so that
several sessions can write concurrently, as they would against PostgreSQL.
The entry upsert uses the same ON CONFLICT statement on both dialects.
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from src.daybook import models  # noqa: F401 - registers tables on the metadata
from src.daybook.api.dependencies import get_db_session, get_object_store_dependency
from src.daybook.core import db
from src.daybook.core.storage import LocalObjectStore, ObjectStore
from src.daybook.main import create_app

MEDIA_URL = "http://test/media"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a fresh database with every table for each test."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'daybook.db'}",
        connect_args={"timeout": 30},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    Tests must call ``await session.commit()`` to persist what they add.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    return tmp_path / "media"


@pytest.fixture
def object_store(media_dir: Path) -> ObjectStore:
    return LocalObjectStore(media_dir, MEDIA_URL, timeout=5.0)


@pytest.fixture
def app_factory(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[ObjectStore], object]:
    """Build an app wired to the test database and a given object store."""
    # Health checks open their own session from the module-level engine
    monkeypatch.setattr(db, "_engine", engine)

    async def override_db_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            yield session

    def build(store: ObjectStore):
        app = create_app()
        app.dependency_overrides[get_db_session] = override_db_session
        app.dependency_overrides[get_object_store_dependency] = lambda: store
        return app

    return build


@pytest.fixture
async def client(app_factory, object_store: ObjectStore) -> AsyncGenerator[AsyncClient]:
    """HTTP client for an app backed by the test database and local media dir."""
    app = app_factory(object_store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
