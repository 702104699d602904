from episodes.domain.entities.episode import EpisodeOut, MonthOut
from episodes.domain.models.episode import Episode
from shared.filters.calendar import month_name


def to_episode_out(row: Episode) -> EpisodeOut:
    return EpisodeOut(
        id=row.id,
        title=row.title,
        upload_date=row.upload_date,
        telecast_date=row.telecast_date,
        media_url=row.media_url,
        series_code=row.series_code,
    )


def to_month_out(code: str) -> MonthOut:
    return MonthOut(value=code, name=month_name(code))
