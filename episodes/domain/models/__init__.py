from episodes.domain.models.episode import Episode

__all__ = ["Episode"]
