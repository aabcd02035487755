"""
Catalog service - Read access to the taxonomy and photos, and server-side
faceted search.
"""

import json
import logging
from pathlib import Path
from typing import Any

import aiofiles
from pydantic import ValidationError

from fotocrm.catalog.filters import FilterState, filter_photos
from fotocrm.catalog.tag_index import TagIndex
from fotocrm.config import get_settings
from fotocrm.core.exceptions import PhotoNotFoundException, StorageException
from fotocrm.schemas.catalog import Photo, TagGroup

logger = logging.getLogger(__name__)

TAGS_FILE = "tags.json"
PHOTOS_FILE = "photos.json"


class CatalogRepository:
    """
    JSON-file catalog snapshot.

    ``tags.json`` holds ``{"tag_groups": [...]}``; ``tags.<lang>.json``
    overrides it for a language. ``photos.json`` holds ``{"photos": [...]}``.
    Missing files read as empty.
    """

    def __init__(self, base_path: str | None = None):
        self.base_path = Path(base_path or get_settings().CATALOG_DATA_PATH)

    async def _read_json(self, filename: str) -> dict[str, Any] | None:
        full_path = self.base_path / filename
        if not full_path.exists():
            return None
        try:
            async with aiofiles.open(full_path, "r", encoding="utf-8") as f:
                return json.loads(await f.read())
        except (OSError, ValueError) as e:
            raise StorageException(
                message=f"Failed to read catalog file: {str(e)}",
                details={"file": filename},
            )

    async def tag_groups(self, lang: str | None = None) -> list[TagGroup]:
        data = None
        if lang:
            data = await self._read_json(f"tags.{lang}.json")
        if data is None:
            data = await self._read_json(TAGS_FILE)
        return self._parse(data, "tag_groups", TagGroup)

    async def photos(self) -> list[Photo]:
        return self._parse(await self._read_json(PHOTOS_FILE), "photos", Photo)

    @staticmethod
    def _parse(data: dict[str, Any] | None, key: str, model: type) -> list:
        if not data:
            return []
        try:
            return [model.model_validate(item) for item in data.get(key, [])]
        except (ValidationError, AttributeError) as e:
            raise StorageException(
                message=f"Malformed catalog data in '{key}': {str(e)}",
            )


class CatalogService:
    """Service class for catalog operations."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    async def list_tag_groups(self, lang: str | None = None) -> list[TagGroup]:
        return await self.repository.tag_groups(self._language(lang))

    async def list_photos(self) -> list[Photo]:
        return await self.repository.photos()

    async def get_photo(self, photo_id: str) -> Photo:
        """
        Get a photo by ID.

        Raises:
            PhotoNotFoundException: If the photo is not in the catalog
        """
        for photo in await self.repository.photos():
            if photo.id == photo_id:
                return photo
        raise PhotoNotFoundException(photo_id)

    async def search(self, state: FilterState, lang: str | None = None) -> list[Photo]:
        """
        Filter the catalog with the given tab, facets and query.

        Tag names are matched in the requested language.
        """
        index = TagIndex(await self.list_tag_groups(lang))
        photos = await self.repository.photos()
        return filter_photos(photos, state, index)

    @staticmethod
    def _language(lang: str | None) -> str:
        settings = get_settings()
        if lang and lang in settings.SUPPORTED_LANGUAGES:
            return lang
        return settings.DEFAULT_LANGUAGE
