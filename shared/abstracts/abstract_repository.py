from abc import ABC, abstractmethod
from typing import Any, List, Sequence

import structlog
from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import StorageError

log = structlog.get_logger()


class AbstractRepository(ABC):
    """
    Read-only repository contract over one dataset session.

    Concrete repositories build statements; execution goes through ``_scalars`` /
    ``_values`` so a storage failure always surfaces as ``StorageError``.
    """

    table: str = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    @abstractmethod
    async def list(self, **filters): ...

    async def _execute(self, stmt: Select):
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            log.error("storage_error", table=self.table, error=str(e))
            raise StorageError(f"query on {self.table} failed: {e}") from e

    async def _scalars(self, stmt: Select) -> Sequence[Any]:
        res = await self._execute(stmt)
        return res.scalars().all()

    async def _values(self, stmt: Select) -> List[str]:
        res = await self._execute(stmt)
        return [row[0] for row in res.all()]
