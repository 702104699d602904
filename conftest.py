# conftest.py
from typing import AsyncGenerator, Iterable

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database.base import CatalogBase, EpisodesBase
from app.core.database.db import get_catalog_session, get_episodes_session
from catalog.domain.models.video import CatalogVideo
from episodes.domain.models.episode import Episode


# ---- Async engines (one in-memory database per dataset) ---------------------

async def _memory_engine(base):
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(base.metadata.create_all)
    return engine


@pytest_asyncio.fixture(scope="function")
async def catalog_engine():
    engine = await _memory_engine(CatalogBase)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def episodes_engine():
    engine = await _memory_engine(EpisodesBase)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def CatalogSessionMaker(catalog_engine):
    return async_sessionmaker(bind=catalog_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture(scope="function")
async def EpisodesSessionMaker(episodes_engine):
    return async_sessionmaker(bind=episodes_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def catalog_session(CatalogSessionMaker):
    async with CatalogSessionMaker() as s:
        yield s


@pytest_asyncio.fixture
async def episodes_session(EpisodesSessionMaker):
    async with EpisodesSessionMaker() as s:
        yield s


@pytest_asyncio.fixture(scope="function")
async def override_get_sessions(CatalogSessionMaker, EpisodesSessionMaker):
    async def _catalog():
        async with CatalogSessionMaker() as s:
            yield s

    async def _episodes():
        async with EpisodesSessionMaker() as s:
            yield s

    app.dependency_overrides[get_catalog_session] = _catalog
    app.dependency_overrides[get_episodes_session] = _episodes
    yield
    app.dependency_overrides.pop(get_catalog_session, None)
    app.dependency_overrides.pop(get_episodes_session, None)


# ---- Seed helpers -----------------------------------------------------------

@pytest_asyncio.fixture
async def seed_videos(catalog_session: AsyncSession):
    """Insert catalog rows given as dicts of model attribute names."""
    async def _seed(rows: Iterable[dict]) -> list[CatalogVideo]:
        objs = [CatalogVideo(**row) for row in rows]
        catalog_session.add_all(objs)
        await catalog_session.commit()
        return objs
    return _seed


@pytest_asyncio.fixture
async def seed_episodes(episodes_session: AsyncSession):
    async def _seed(rows: Iterable[dict]) -> list[Episode]:
        objs = [Episode(**row) for row in rows]
        episodes_session.add_all(objs)
        await episodes_session.commit()
        return objs
    return _seed


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client(override_get_sessions) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
