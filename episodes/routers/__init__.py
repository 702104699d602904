from episodes.routers.episodes import router as episodes_router

__all__ = ["episodes_router"]
