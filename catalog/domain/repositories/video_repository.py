from typing import List, Sequence

from sqlalchemy import select

from catalog.domain.models.video import CatalogVideo
from shared.abstracts.abstract_repository import AbstractRepository
from shared.filters import Clause, Dimension, FacetResolver, FacetSchema, Match, Page, facet

CATALOG_SCHEMA = FacetSchema(
    {
        Dimension.category: facet(Match.exact, CatalogVideo.category),
        Dimension.theme: facet(Match.exact, CatalogVideo.theme),
        Dimension.language: facet(Match.folded, CatalogVideo.language, list_folded=True),
        Dimension.region: facet(Match.folded, CatalogVideo.entity_region),
        Dimension.entity: facet(Match.exact, CatalogVideo.entity_name),
        Dimension.search: facet(Match.contains, CatalogVideo.title, CatalogVideo.entity_name),
    }
)


class CatalogVideoRepository(AbstractRepository):
    table = CatalogVideo.__tablename__
    schema = CATALOG_SCHEMA

    async def list(self, *, clauses: Sequence[Clause] = (), page: Page) -> Sequence[CatalogVideo]:
        stmt = (
            select(CatalogVideo)
            .where(self.schema.where(clauses))
            .order_by(CatalogVideo.upload_date.desc(), CatalogVideo.id.desc())
            .limit(page.limit)
            .offset(page.offset)
        )
        return await self._scalars(stmt)

    async def facet_values(self, dimension: Dimension, clauses: Sequence[Clause] = ()) -> List[str]:
        return await self._values(FacetResolver(self.schema).query(dimension, clauses))
