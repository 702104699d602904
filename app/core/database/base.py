from sqlalchemy.orm import DeclarativeBase


class CatalogBase(DeclarativeBase):
    """Declarative base for the ministry-video catalog dataset (CBNYT_sql.db)."""


class EpisodesBase(DeclarativeBase):
    """Declarative base for the date-indexed episode dataset (ENZ_sql.db)."""
