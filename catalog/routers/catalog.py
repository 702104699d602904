from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database.db import get_catalog_session
from app.core.http import no_store
from catalog.domain.entities.video import CatalogVideoOut, FacetsOut
from catalog.domain.repositories.video_repository import CatalogVideoRepository
from catalog.services.catalog_service import CatalogService
from shared.filters import normalize

router = APIRouter(
    tags=["catalog"],
    dependencies=[Depends(no_store)],
    responses={
        500: {"description": "Dataset query failed or dataset not available."},
    },
)


def get_catalog_service(db: AsyncSession = Depends(get_catalog_session)) -> CatalogService:
    return CatalogService(CatalogVideoRepository(db), regional_category=settings.regional_category)


# ==============================
# Facets
# ==============================
@router.get(
    "/filters",
    summary="List available facet values",
    description=(
        "Returns the facet values still available given the facets already chosen.\n\n"
        "- `languages` is always computed (upper-cased values).\n"
        "- `regions` and `entities` are only computed for the regionally-structured category "
        "(`Choirs in concert`); for other categories they are empty lists.\n"
        "- Each list is narrowed by the *other* selected facets, never by itself.\n"
        "- Regions that differ only in case are listed once.\n"
        "- When no category is sent, the regionally-structured category is used.\n\n"
        "`Ministry_Category` is accepted as a legacy alias of `category`, `state` of `region`."
    ),
    response_model=FacetsOut,
    responses={
        200: {
            "description": "Facet lists.",
            "content": {
                "application/json": {
                    "examples": {
                        "narrowed": {
                            "summary": "Narrowed by language",
                            "value": {"languages": ["HINDI", "TAMIL"], "regions": ["Punjab"], "entities": ["Grace Church"]},
                        }
                    }
                }
            },
        }
    },
)
async def list_facets(
    category: Optional[str] = Query(None, description="Ministry category (exact match)."),
    Ministry_Category: Optional[str] = Query(None, description="Legacy alias of `category`."),
    language: Optional[str] = Query(None, description="Language (case-insensitive)."),
    region: Optional[str] = Query(None, description="Region / church state (case-insensitive)."),
    state: Optional[str] = Query(None, description="Legacy alias of `region`."),
    svc: CatalogService = Depends(get_catalog_service),
):
    return await svc.list_facets(
        category=normalize(Ministry_Category) or category,
        language=language,
        region=normalize(state) or region,
    )


# ==============================
# Videos
# ==============================
@router.get(
    "/videos",
    summary="List catalog videos",
    description=(
        "Filtered, paginated list of catalog videos ordered by upload date (newest first).\n\n"
        "### Filters\n"
        "- `category`, `theme`, `entity`: exact match (surrounding whitespace ignored)\n"
        "- `language`, `region`: case-insensitive match\n"
        "- `q`: substring of the title or the church name (case-insensitive)\n"
        "- Pagination via `limit` (1–100, default 20) and `offset`, or `page` (1-based)\n\n"
        "Malformed numbers fall back to defaults; unknown parameters are ignored."
    ),
    response_model=List[CatalogVideoOut],
    responses={
        200: {
            "description": "Videos.",
            "content": {
                "application/json": {
                    "examples": {
                        "videos": {
                            "summary": "One page of videos",
                            "value": [
                                {
                                    "id": 17,
                                    "title": "Christmas Carols 2023",
                                    "language": "Hindi",
                                    "category": "Choirs in concert",
                                    "theme": None,
                                    "churchName": "Grace Church",
                                    "churchState": "Punjab",
                                    "youtubeUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                                    "uploadDate": "2023-12-20",
                                }
                            ],
                        }
                    }
                }
            },
        }
    },
)
async def list_videos(
    category: Optional[str] = Query(None, description="Ministry category (exact match)."),
    Ministry_Category: Optional[str] = Query(None, description="Legacy alias of `category`."),
    theme: Optional[str] = Query(None, description="Theme (exact match)."),
    language: Optional[str] = Query(None, description="Language (case-insensitive)."),
    region: Optional[str] = Query(None, description="Region / church state (case-insensitive)."),
    state: Optional[str] = Query(None, description="Legacy alias of `region`."),
    entity: Optional[str] = Query(None, description="Church name (exact match)."),
    church: Optional[str] = Query(None, description="Legacy alias of `entity`."),
    q: Optional[str] = Query(None, description="Free-text search over title and church name."),
    page: Optional[str] = Query(None, description="1-based page number."),
    limit: Optional[str] = Query(None, description="Page size (clamped to 1–100, default 20)."),
    offset: Optional[str] = Query(None, description="Row offset; wins over `page`."),
    svc: CatalogService = Depends(get_catalog_service),
):
    return await svc.list_videos(
        category=normalize(Ministry_Category) or category,
        theme=theme,
        language=language,
        region=normalize(state) or region,
        entity=normalize(church) or entity,
        q=q,
        page=page,
        limit=limit,
        offset=offset,
    )
