"""
Client-side catalog browser: photo snapshot, taxonomy index and filter state.
"""

import logging

from fotocrm.catalog.filters import FilterState, filter_photos
from fotocrm.catalog.tag_index import FACET_GROUP_IDS, TagIndex
from fotocrm.clients.http import CatalogClient
from fotocrm.core.exceptions import ValidationException
from fotocrm.schemas.catalog import Photo, Tab, TagGroup

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """
    Holds the read-only catalog snapshot and the user's filter selections.

    ``visible()`` recomputes the filtered set from scratch on every call.
    """

    def __init__(
        self,
        photos: list[Photo] | None = None,
        tag_groups: list[TagGroup] | None = None,
        language: str | None = None,
    ):
        self.photos: list[Photo] = list(photos or [])
        self.index = TagIndex(tag_groups or [])
        self.state = FilterState()
        self.language = language

    @property
    def tabs(self) -> list[Tab]:
        return self.index.primary_tabs()

    async def refresh(self, client: CatalogClient, language: str | None = None) -> None:
        """Fetch taxonomy and photos; failures leave empty lists."""
        self.language = language or self.language
        tag_groups = await client.fetch_tag_groups(self.language)
        self.photos = await client.fetch_photos()
        self.index = TagIndex(tag_groups)
        logger.info(
            f"Catalog loaded: {len(self.photos)} photos, "
            f"{len(tag_groups)} tag groups (lang={self.language})"
        )

    async def switch_language(self, client: CatalogClient, language: str) -> None:
        """Refetch the taxonomy in another language and rebuild the index."""
        self.language = language
        self.index = TagIndex(await client.fetch_tag_groups(language))

    def set_tab(self, tab_id: str | None) -> None:
        valid = {tab.id for tab in self.tabs}
        if tab_id is not None and tab_id not in valid:
            raise ValidationException(
                message=f"Unknown tab '{tab_id}'",
                details={"valid_tabs": sorted(valid)},
            )
        self.state.active_tab = tab_id

    def toggle_facet(self, group_id: str, tag_id: str) -> bool:
        """
        Toggle a tag in a facet selection.

        Returns:
            True if the tag is now selected, False if it was removed
        """
        if group_id not in FACET_GROUP_IDS:
            raise ValidationException(
                message=f"Unknown facet '{group_id}'",
                details={"valid_facets": list(FACET_GROUP_IDS)},
            )
        selection = self.state.selected_facets.setdefault(group_id, set())
        if tag_id in selection:
            selection.discard(tag_id)
            return False
        selection.add(tag_id)
        return True

    def set_search(self, query: str) -> None:
        self.state.search_query = query or ""

    def clear_filters(self) -> None:
        self.state = FilterState()

    def selected_count(self, group_id: str) -> int:
        return len(self.state.facet(group_id))

    def visible(self) -> list[Photo]:
        return filter_photos(self.photos, self.state, self.index)

    def find_photo(self, photo_id: str) -> Photo | None:
        return next((photo for photo in self.photos if photo.id == photo_id), None)
