"""Fixtures for tests that hit the SQLite-backed store and the ASGI app."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from zoo_app.infrastructure.database import Base, async_session_factory, engine, init_models
from zoo_app.main import app


@pytest_asyncio.fixture
async def database():
    """Fresh tables per test; pooled connections are released on the test's loop."""
    await init_models()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(database):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
