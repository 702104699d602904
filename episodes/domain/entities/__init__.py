from episodes.domain.entities.episode import EpisodeOut, MonthOut, MonthsOut, YearsOut

__all__ = ["EpisodeOut", "MonthOut", "MonthsOut", "YearsOut"]
