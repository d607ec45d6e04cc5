"""Fixtures for API tests against an in-memory SQLite database."""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from records_api.config import Settings, get_settings
from records_api.infrastructure.database import Base
from records_api.infrastructure.database.session import get_db_session
from records_api.infrastructure.dependencies import get_fetch_client
from records_api.main import create_app
from tests.fakes import FakeFetchClient


@pytest_asyncio.fixture
async def session_factory():
    """Per-test engine with a fresh schema."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def fetch_client() -> FakeFetchClient:
    return FakeFetchClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(remote_url_template="https://volumes.test/search?q={search}:{term}")


@pytest.fixture
def app(session_factory, fetch_client: FakeFetchClient, settings: Settings) -> FastAPI:
    app = create_app()

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_fetch_client] = lambda: fetch_client
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def configure(app: FastAPI, settings: Settings) -> Callable[..., Settings]:
    """Swap in settings with the given overrides for the rest of the test."""

    def _configure(**overrides) -> Settings:
        updated = settings.model_copy(update=overrides)
        app.dependency_overrides[get_settings] = lambda: updated
        return updated

    return _configure
