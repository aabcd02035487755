"""
Catalog endpoints - taxonomy, photos and faceted search.
"""

from fastapi import APIRouter, Query

from fotocrm.catalog.filters import FilterState
from fotocrm.catalog.tag_index import FACET_GROUP_IDS
from fotocrm.dependencies import Catalog
from fotocrm.schemas.catalog import (
    Photo,
    PhotoListResponse,
    PhotoSearchResponse,
    TagGroupListResponse,
)
from fotocrm.schemas.error import ErrorResponse
from fotocrm.services.catalog_service import CatalogService

router = APIRouter()


def _split(value: str | None) -> set[str]:
    if not value:
        return set()
    return {item.strip() for item in value.split(",") if item.strip()}


@router.get("/tags", response_model=TagGroupListResponse)
async def list_tag_groups(
    catalog: Catalog,
    lang: str | None = Query(default=None, description="Taxonomy language"),
):
    """
    Get the grouped tag taxonomy.

    Group and tag order is the curated order; unsupported languages fall
    back to the default language.
    """
    service = CatalogService(catalog)
    return TagGroupListResponse(tag_groups=await service.list_tag_groups(lang))


@router.get("/photos", response_model=PhotoListResponse)
async def list_photos(catalog: Catalog):
    """List all catalog photos."""
    service = CatalogService(catalog)
    return PhotoListResponse(photos=await service.list_photos())


@router.get("/photos/search", response_model=PhotoSearchResponse)
async def search_photos(
    catalog: Catalog,
    tab: str | None = Query(default=None, description="Tipo tag id or 'other'"),
    encabado: str | None = Query(default=None, description="Comma-separated tag ids"),
    acero: str | None = Query(default=None, description="Comma-separated tag ids"),
    extras: str | None = Query(default=None, description="Comma-separated tag ids"),
    q: str | None = Query(default=None, description="Free-text query"),
    lang: str | None = Query(default=None, description="Language for tag names"),
):
    """
    Filter photos by tab, facets and free text.

    Tag ids within a facet combine with OR, facets combine with AND.
    The text query matches photo text and tag names, ignoring case and accents.
    """
    facets = dict(zip(FACET_GROUP_IDS, (_split(encabado), _split(acero), _split(extras))))
    state = FilterState(active_tab=tab or None, selected_facets=facets, search_query=q or "")

    service = CatalogService(catalog)
    photos = await service.search(state, lang)
    return PhotoSearchResponse(photos=photos, total=len(photos))


@router.get(
    "/photos/{photo_id}",
    response_model=Photo,
    responses={404: {"model": ErrorResponse}},
)
async def get_photo(photo_id: str, catalog: Catalog):
    """Get a single photo by ID."""
    service = CatalogService(catalog)
    return await service.get_photo(photo_id)
