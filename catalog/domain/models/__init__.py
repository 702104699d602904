from catalog.domain.models.video import CatalogVideo

__all__ = ["CatalogVideo"]
