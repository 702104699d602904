from typing import List, Optional, Union

from episodes.domain.entities.episode import EpisodeOut, MonthOut
from episodes.domain.projection import to_episode_out, to_month_out
from episodes.domain.repositories.episode_repository import EpisodeRepository
from shared.errors import ValidationError
from shared.filters import Dimension, normalize, normalize_flag, paginate


class EpisodeService:
    """
    Calendar facets and listing for the date-indexed episode series.

    Only eligible episodes (valid telecast date, non-blank media link) are visible;
    years and months come back newest first.
    """

    def __init__(self, repo: EpisodeRepository):
        self.repo = repo

    async def list_years(self) -> List[str]:
        return await self.repo.calendar_values(Dimension.year)

    async def list_months(
        self,
        year: Optional[str] = None,
        with_names: Optional[str] = None,
    ) -> Union[List[str], List[MonthOut]]:
        if normalize(year) is None:
            raise ValidationError("year is required")
        clauses = self.repo.schema.clauses({Dimension.year: year})
        months = await self.repo.calendar_values(Dimension.month, clauses)
        if normalize_flag(with_names):
            return [to_month_out(m) for m in months]
        return months

    async def list_dates(self) -> List[str]:
        return await self.repo.dates()

    async def list_episodes(
        self,
        year: Optional[str] = None,
        month: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        offset: Optional[str] = None,
    ) -> List[EpisodeOut]:
        clauses = self.repo.schema.clauses({Dimension.year: year, Dimension.month: month})
        rows = await self.repo.list(clauses=clauses, page=paginate(limit=limit, offset=offset, page=page))
        return [to_episode_out(row) for row in rows]
