from catalog.domain.repositories.video_repository import CATALOG_SCHEMA, CatalogVideoRepository

__all__ = ["CATALOG_SCHEMA", "CatalogVideoRepository"]
