"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  The engine is handed to ``create_app`` the same way a
deployment would hand it a PostgreSQL engine.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.api.app import create_app
from src.api.middleware import limiter
from src.config import Settings
from src.infrastructure.database import (
    Base,
    build_engine,
    build_session_factory,
    create_tables,
)


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    test_engine = build_engine(TEST_DB_URL)
    await create_tables(test_engine)
    yield test_engine
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with build_session_factory(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the in-memory database.

    App exceptions are not re-raised so the catch-all 500 handler can be
    asserted on like any other response.
    """
    limiter.reset()
    app = create_app(
        settings=Settings(database_url=TEST_DB_URL, create_tables_on_startup=False),
        engine=engine,
    )
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
