from episodes.domain.repositories.episode_repository import EPISODE_SCHEMA, EpisodeRepository

__all__ = ["EPISODE_SCHEMA", "EpisodeRepository"]
