from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_episodes_session
from app.core.http import no_store
from episodes.domain.entities.episode import EpisodeOut, MonthsOut, YearsOut
from episodes.domain.repositories.episode_repository import EpisodeRepository
from episodes.services.episode_service import EpisodeService

router = APIRouter(
    prefix="/enz",
    tags=["episodes"],
    dependencies=[Depends(no_store)],
    responses={
        500: {"description": "Dataset query failed or dataset not available."},
    },
)


def get_episode_service(db: AsyncSession = Depends(get_episodes_session)) -> EpisodeService:
    return EpisodeService(EpisodeRepository(db))


@router.get(
    "/years",
    summary="Years with episodes",
    description="Years (newest first) that have at least one playable episode with a valid telecast date.",
    response_model=YearsOut,
    responses={
        200: {"content": {"application/json": {"examples": {"years": {"value": {"years": ["2024", "2023"]}}}}}},
    },
)
async def list_years(svc: EpisodeService = Depends(get_episode_service)):
    return YearsOut(years=await svc.list_years())


@router.get(
    "/months",
    summary="Months with episodes within a year",
    description=(
        "Two-digit months (newest first) of the given year that have at least one playable episode.\n\n"
        "`year` is required (400 when missing). With `withNames=1`, each month is returned as "
        "`{value, name}` with the English month name."
    ),
    response_model=MonthsOut,
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "codes": {"summary": "Month codes", "value": {"months": ["11", "07"]}},
                        "named": {
                            "summary": "With names",
                            "value": {"months": [{"value": "07", "name": "July"}]},
                        },
                    }
                }
            }
        },
        400: {
            "description": "Missing year.",
            "content": {"application/json": {"examples": {"missing_year": {"value": {"detail": "year is required"}}}}},
        },
    },
)
async def list_months(
    year: Optional[str] = Query(None, description="Four-digit year (required)."),
    with_names: Optional[str] = Query(None, alias="withNames", description="`1`/`true` to pair codes with month names."),
    svc: EpisodeService = Depends(get_episode_service),
):
    return MonthsOut(months=await svc.list_months(year=year, with_names=with_names))


@router.get(
    "/dates",
    summary="Telecast dates",
    description="Distinct telecast dates (`YYYY-MM-DD`, newest first) of playable episodes.",
    response_model=List[str],
)
async def list_dates(svc: EpisodeService = Depends(get_episode_service)):
    return await svc.list_dates()


@router.get(
    "",
    summary="List episodes",
    description=(
        "Playable episodes with a valid telecast date, newest telecast first.\n\n"
        "- `year`, `month`: optional calendar filters (`month` accepts `7` or `07`)\n"
        "- Pagination via `limit` (1–100, default 20) and `offset`, or `page` (1-based)\n"
    ),
    response_model=List[EpisodeOut],
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "episodes": {
                            "value": [
                                {
                                    "id": 3,
                                    "title": "Episode 112",
                                    "uploadDate": "2023-07-16",
                                    "telecastDate": "2023-07-15",
                                    "youtubeUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                                    "ESS_CODE": "ENZ-112",
                                }
                            ]
                        }
                    }
                }
            }
        }
    },
)
async def list_episodes(
    year: Optional[str] = Query(None, description="Four-digit year."),
    month: Optional[str] = Query(None, description="Month, `1`–`12` or `01`–`12`."),
    page: Optional[str] = Query(None, description="1-based page number."),
    limit: Optional[str] = Query(None, description="Page size (clamped to 1–100, default 20)."),
    offset: Optional[str] = Query(None, description="Row offset; wins over `page`."),
    svc: EpisodeService = Depends(get_episode_service),
):
    return await svc.list_episodes(year=year, month=month, page=page, limit=limit, offset=offset)
