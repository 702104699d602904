from catalog.domain.entities.video import CatalogVideoOut, FacetsOut

__all__ = ["CatalogVideoOut", "FacetsOut"]
