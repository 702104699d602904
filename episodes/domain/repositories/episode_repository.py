from typing import List, Sequence

from sqlalchemy import and_, select
from sqlalchemy.sql.elements import ColumnElement

from episodes.domain.models.episode import Episode
from shared.abstracts.abstract_repository import AbstractRepository
from shared.filters import Clause, Dimension, FacetResolver, FacetSchema, Match, Page, facet
from shared.filters.calendar import calendar_date, has_valid_date, is_playable

EPISODE_SCHEMA = FacetSchema(
    {
        Dimension.year: facet(Match.year, Episode.telecast_date),
        Dimension.month: facet(Match.month, Episode.telecast_date),
    }
)


def eligible() -> ColumnElement[bool]:
    """A telecast date that parses as a calendar date, and a non-blank media link."""
    return and_(has_valid_date(Episode.telecast_date), is_playable(Episode.media_url))


class EpisodeRepository(AbstractRepository):
    table = Episode.__tablename__
    schema = EPISODE_SCHEMA

    async def list(self, *, clauses: Sequence[Clause] = (), page: Page) -> Sequence[Episode]:
        stmt = (
            select(Episode)
            .where(eligible(), self.schema.where(clauses))
            .order_by(calendar_date(Episode.telecast_date).desc(), Episode.id.desc())
            .limit(page.limit)
            .offset(page.offset)
        )
        return await self._scalars(stmt)

    async def calendar_values(self, dimension: Dimension, clauses: Sequence[Clause] = ()) -> List[str]:
        stmt = FacetResolver(self.schema).query(dimension, clauses, within=[eligible()], descending=True)
        return await self._values(stmt)

    async def dates(self) -> List[str]:
        day = calendar_date(Episode.telecast_date).label("telecast_day")
        stmt = select(day).distinct().where(eligible()).order_by(day.desc())
        return await self._values(stmt)
