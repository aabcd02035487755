"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fotocrm.config import Settings, get_settings
from fotocrm.db.session import get_db
from fotocrm.services.catalog_service import CatalogRepository


def get_catalog_repository() -> CatalogRepository:
    """Catalog snapshot rooted at settings.CATALOG_DATA_PATH."""
    return CatalogRepository()


# Type aliases for cleaner endpoint signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
Catalog = Annotated[CatalogRepository, Depends(get_catalog_repository)]
AppSettings = Annotated[Settings, Depends(get_settings)]
