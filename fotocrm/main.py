"""
FotoCRM Catalog API - Main Application Entry Point.

Serves the knife photo catalog (taxonomy, photos, faceted search) and the
remote store for shared configurator selections.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fotocrm import __version__
from fotocrm.api.v1.router import api_router
from fotocrm.config import get_settings
from fotocrm.core.exceptions import FotoCRMException

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Catalog data: {settings.CATALOG_DATA_PATH}")

    from fotocrm.db.session import engine, is_using_sqlite_fallback

    if is_using_sqlite_fallback():
        logger.warning("[DEV MODE] Using SQLite fallback database")
        from fotocrm.db.base import Base
        # Import all models to register them
        from fotocrm.models import SavedConfiguration  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Development database ready")
    else:
        logger.info("Database: PostgreSQL")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## FotoCRM Catalog API

Catalog of hand-made knives with faceted browsing and shareable configurations.

### Features
- **Taxonomy**: grouped tags (tipo, encabado, acero, extras) per language
- **Faceted search**: tab, facet (OR within, AND across) and accent-insensitive text filters
- **Configurations**: save up to 5 buckets of 6 photos under a short share code
    """,
    version=__version__,
    openapi_tags=[
        {"name": "catalog", "description": "Taxonomy and photo catalog"},
        {"name": "configurations", "description": "Shared configurator selections"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FotoCRMException)
async def fotocrm_exception_handler(request: Request, exc: FotoCRMException) -> JSONResponse:
    """Render FotoCRM exceptions as {"error", "message", "details"} payloads."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API pointers."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fotocrm.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
