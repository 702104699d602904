from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database.db import Datasets
from app.core.database.seed import seed_datasets
from app.core.logging_setup import setup_logging
from shared.errors import CatalogError, StorageError

# Routers
from catalog.routers import catalog_router
from episodes.routers import episodes_router

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: seed copy on first boot, then open both datasets read-only
    setup_logging()
    seed_datasets(
        settings.seed_dir,
        settings.db_dir,
        [settings.catalog_db_file, settings.episodes_db_file],
        overwrite=settings.seed_overwrite,
    )
    app.state.datasets = Datasets.open(settings.catalog_db_path, settings.episodes_db_path)
    log.info("api_started", host=settings.app_host, port=settings.app_port)
    yield
    # Shutdown
    await app.state.datasets.dispose()
    log.info("api_stopped")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if isinstance(exc, StorageError):
        log.error("api_error", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health", tags=["system"])
async def health():
    return {"ok": True}


app.include_router(catalog_router)
app.include_router(episodes_router)


def run() -> None:
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port)
