from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator, Optional

import structlog
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from shared.errors import StorageError

log = structlog.get_logger()


def readonly_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///file:{path.resolve().as_posix()}?mode=ro&uri=true"


class DatasetHandle:
    """
    One read-only dataset: an async engine plus its session factory.

    Opened once at startup. A dataset whose file is missing stays closed and every
    session request on it raises ``StorageError``.
    """

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        self.engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker] = None

    @classmethod
    def from_engine(cls, name: str, engine: AsyncEngine) -> "DatasetHandle":
        handle = cls(name, Path(engine.url.database or ""))
        handle._bind(engine)
        return handle

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._sessions = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

    @property
    def is_open(self) -> bool:
        return self._sessions is not None

    def open(self) -> "DatasetHandle":
        if not self.path.exists():
            log.error("dataset_missing", dataset=self.name, path=str(self.path))
            return self
        self._bind(create_async_engine(readonly_url(self.path), echo=settings.debug))
        log.info("dataset_opened", dataset=self.name, path=str(self.path))
        return self

    def session(self) -> AsyncSession:
        if self._sessions is None:
            raise StorageError(f"dataset {self.name} is not available")
        return self._sessions()

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


class Datasets:
    def __init__(self, catalog: DatasetHandle, episodes: DatasetHandle):
        self.catalog = catalog
        self.episodes = episodes

    @classmethod
    def open(cls, catalog_path: Path, episodes_path: Path) -> "Datasets":
        return cls(
            catalog=DatasetHandle("catalog", catalog_path).open(),
            episodes=DatasetHandle("episodes", episodes_path).open(),
        )

    async def dispose(self) -> None:
        await self.catalog.dispose()
        await self.episodes.dispose()


def _datasets(request: Request) -> Datasets:
    datasets = getattr(request.app.state, "datasets", None)
    if datasets is None:
        raise StorageError("datasets are not initialised")
    return datasets


async def get_catalog_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with _datasets(request).catalog.session() as session:
        yield session


async def get_episodes_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with _datasets(request).episodes.session() as session:
        yield session
