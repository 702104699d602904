from typing import List, Optional

from app.core.config import settings
from catalog.domain.entities.video import CatalogVideoOut, FacetsOut
from catalog.domain.projection import to_video_out
from catalog.domain.repositories.video_repository import CatalogVideoRepository
from shared.filters import Dimension, normalize, paginate


class CatalogService:
    """
    Read-only queries over the ministry-video catalog:
      - facet listings with cascading narrowing (languages / regions / entities)
      - filtered, paginated video listing

    Only the regionally-structured category exposes region and entity facets. When a
    facet listing gets no category it scopes to that category.
    """

    def __init__(self, repo: CatalogVideoRepository, regional_category: Optional[str] = None):
        self.repo = repo
        self.regional_category = regional_category or settings.regional_category

    async def list_facets(
        self,
        category: Optional[str] = None,
        language: Optional[str] = None,
        region: Optional[str] = None,
    ) -> FacetsOut:
        effective = normalize(category) or self.regional_category
        clauses = self.repo.schema.clauses(
            {
                Dimension.category: effective,
                Dimension.language: language,
                Dimension.region: region,
            }
        )

        languages = await self.repo.facet_values(Dimension.language, clauses)
        regions: List[str] = []
        entities: List[str] = []
        if effective == self.regional_category:
            regions = await self.repo.facet_values(Dimension.region, clauses)
            entities = await self.repo.facet_values(Dimension.entity, clauses)

        return FacetsOut(languages=languages, regions=regions, entities=entities)

    async def list_videos(
        self,
        category: Optional[str] = None,
        theme: Optional[str] = None,
        language: Optional[str] = None,
        region: Optional[str] = None,
        entity: Optional[str] = None,
        q: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        offset: Optional[str] = None,
    ) -> List[CatalogVideoOut]:
        clauses = self.repo.schema.clauses(
            {
                Dimension.category: category,
                Dimension.theme: theme,
                Dimension.language: language,
                Dimension.region: region,
                Dimension.entity: entity,
                Dimension.search: q,
            }
        )
        rows = await self.repo.list(clauses=clauses, page=paginate(limit=limit, offset=offset, page=page))
        return [to_video_out(row) for row in rows]
