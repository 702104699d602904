from catalog.routers.catalog import router as catalog_router

__all__ = ["catalog_router"]
