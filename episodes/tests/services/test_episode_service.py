import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from episodes.domain.entities.episode import MonthOut
from episodes.domain.repositories import EpisodeRepository
from episodes.services.episode_service import EpisodeService
from shared.errors import ValidationError


def _svc(db: AsyncSession) -> EpisodeService:
    return EpisodeService(EpisodeRepository(db))


@pytest.fixture
def episode_rows():
    return [
        {"title": "Ep 1", "telecast_date": "2023-07-15", "media_url": "https://youtu.be/1", "series_code": "ENZ-1"},
        {"title": "Ep 2", "telecast_date": "2023-11-02", "media_url": None, "series_code": "ENZ-2"},
        {"title": "Ep 3", "telecast_date": "2024-03-09", "media_url": "https://youtu.be/3", "series_code": "ENZ-3"},
        {"title": "Ep 4", "telecast_date": " 2023-01-20 ", "media_url": "https://youtu.be/4", "series_code": "ENZ-4"},
        {"title": "Ep 5", "telecast_date": "2022-12-31", "media_url": "   ", "series_code": "ENZ-5"},
        {"title": "Ep 6", "telecast_date": "someday", "media_url": "https://youtu.be/6", "series_code": "ENZ-6"},
        {"title": "Ep 7", "telecast_date": "", "media_url": "https://youtu.be/7", "series_code": "ENZ-7"},
        {"title": "Ep 8", "telecast_date": None, "media_url": "https://youtu.be/8", "series_code": "ENZ-8"},
        {"title": "Ep 9", "telecast_date": "2023-07-28", "media_url": "https://youtu.be/9", "series_code": "ENZ-9"},
        {"title": "Ep 10", "telecast_date": "45123", "media_url": "https://youtu.be/10", "series_code": "ENZ-10"},
        {"title": "Ep 11", "telecast_date": "2460000.5", "media_url": "https://youtu.be/11", "series_code": "ENZ-11"},
    ]


# ==============================================================================
# Years / months
# ==============================================================================

@pytest.mark.asyncio
async def test_should_only_count_playable_episodes_in_calendar_facets(episodes_session, seed_episodes):
    # GIVEN: the November episode has no media link
    await seed_episodes(
        [
            {"telecast_date": "2023-07-15", "media_url": "https://youtu.be/1"},
            {"telecast_date": "2023-11-02", "media_url": None},
        ]
    )
    svc = _svc(episodes_session)

    # WHEN
    years = await svc.list_years()
    months = await svc.list_months(year="2023")

    # THEN
    assert years == ["2023"]
    assert months == ["07"]


@pytest.mark.asyncio
async def test_should_list_years_newest_first_skipping_invalid_dates(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)

    # WHEN
    years = await _svc(episodes_session).list_years()

    # THEN: 2022 only has a blank media link
    assert years == ["2024", "2023"]


@pytest.mark.asyncio
async def test_should_list_months_of_a_year_newest_first(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)

    # WHEN
    months = await _svc(episodes_session).list_months(year="2023")

    # THEN
    assert months == ["07", "01"]


@pytest.mark.asyncio
async def test_should_pair_months_with_english_names_when_requested(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)
    svc = _svc(episodes_session)

    # WHEN
    named = await svc.list_months(year="2023", with_names="1")
    plain = await svc.list_months(year="2023", with_names="0")

    # THEN
    assert named == [MonthOut(value="07", name="July"), MonthOut(value="01", name="January")]
    assert plain == ["07", "01"]


@pytest.mark.asyncio
@pytest.mark.parametrize("year", [None, "", "   "])
async def test_should_raise_validation_error_when_year_is_missing(episodes_session, year):
    with pytest.raises(ValidationError) as exc:
        await _svc(episodes_session).list_months(year=year)
    assert exc.value.message == "year is required"
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_should_return_no_months_for_a_year_without_episodes(episodes_session, seed_episodes, episode_rows):
    await seed_episodes(episode_rows)
    assert await _svc(episodes_session).list_months(year="1999") == []


# ==============================================================================
# Dates / listing
# ==============================================================================

@pytest.mark.asyncio
async def test_should_list_distinct_telecast_dates_newest_first(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows + [{"telecast_date": "2024-03-09", "media_url": "https://youtu.be/dup"}])

    # WHEN
    dates = await _svc(episodes_session).list_dates()

    # THEN
    assert dates == ["2024-03-09", "2023-07-28", "2023-07-15", "2023-01-20"]


@pytest.mark.asyncio
async def test_should_list_eligible_episodes_by_telecast_date_desc(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)

    # WHEN
    episodes = await _svc(episodes_session).list_episodes()

    # THEN
    assert [e.title for e in episodes] == ["Ep 3", "Ep 9", "Ep 1", "Ep 4"]


@pytest.mark.asyncio
async def test_should_filter_episodes_by_year_and_unpadded_month(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)
    svc = _svc(episodes_session)

    # WHEN
    july = await svc.list_episodes(year="2023", month="7")
    padded = await svc.list_episodes(year="2023", month="07")
    any_year_july = await svc.list_episodes(month="07")

    # THEN
    assert [e.title for e in july] == ["Ep 9", "Ep 1"]
    assert [e.id for e in padded] == [e.id for e in july]
    assert [e.id for e in any_year_july] == [e.id for e in july]


@pytest.mark.asyncio
async def test_should_paginate_episodes(episodes_session, seed_episodes, episode_rows):
    # GIVEN
    await seed_episodes(episode_rows)
    svc = _svc(episodes_session)

    # WHEN
    second = await svc.list_episodes(page="2", limit="2")
    malformed = await svc.list_episodes(limit="lots")

    # THEN
    assert [e.title for e in second] == ["Ep 1", "Ep 4"]
    assert len(malformed) == 4


@pytest.mark.asyncio
async def test_should_return_empty_results_when_dataset_is_empty(episodes_session):
    svc = _svc(episodes_session)
    assert await svc.list_years() == []
    assert await svc.list_dates() == []
    assert await svc.list_episodes() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("telecast_date", ["45123", "2460000.5", "20230715"])
async def test_should_never_surface_episodes_dated_by_bare_numbers(episodes_session, seed_episodes, telecast_date):
    # GIVEN: SQLite date() reads a bare number as a Julian day
    await seed_episodes([{"title": "Serial", "telecast_date": telecast_date, "media_url": "https://youtu.be/x"}])
    svc = _svc(episodes_session)

    # WHEN / THEN
    assert await svc.list_years() == []
    assert await svc.list_dates() == []
    assert await svc.list_episodes() == []
