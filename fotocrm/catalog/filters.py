"""
Faceted filtering of the photo catalog.

Stages run in a fixed order, each narrowing the previous result:

1. tab filter ("tipo" group, single-select, or the synthetic "other" tab)
2. facet filters (OR within a facet, AND across facets)
3. free-text filter over photo text and taxonomy tag names

The result keeps catalog order and is always a subset of the input.
"""

from typing import Iterable, Sequence

from pydantic import BaseModel, Field

from fotocrm.catalog.tag_index import FACET_GROUP_IDS, OTHER_TAB_ID, TagIndex
from fotocrm.core.text import normalize
from fotocrm.schemas.catalog import Photo


def _empty_facets() -> dict[str, set[str]]:
    return {group_id: set() for group_id in FACET_GROUP_IDS}


class FilterState(BaseModel):
    """Active tab, per-facet selections and the search query."""

    active_tab: str | None = None
    selected_facets: dict[str, set[str]] = Field(default_factory=_empty_facets)
    search_query: str = ""

    def facet(self, group_id: str) -> set[str]:
        return self.selected_facets.get(group_id, set())

    @property
    def is_empty(self) -> bool:
        return (
            self.active_tab is None
            and not any(self.selected_facets.values())
            and not self.search_query.strip()
        )


def filter_by_tab(photos: Iterable[Photo], active_tab: str | None, index: TagIndex) -> list[Photo]:
    if active_tab is None:
        return list(photos)
    if active_tab == OTHER_TAB_ID:
        other_ids = frozenset(index.other_tag_ids())
        return [photo for photo in photos if not photo.tag_set.isdisjoint(other_ids)]
    return [photo for photo in photos if active_tab in photo.tag_set]


def filter_by_facets(photos: Iterable[Photo], selected_facets: dict[str, set[str]]) -> list[Photo]:
    result = list(photos)
    for selection in selected_facets.values():
        if not selection:
            continue
        result = [photo for photo in result if not photo.tag_set.isdisjoint(selection)]
    return result


def matches_text(photo: Photo, needle: str, index: TagIndex) -> bool:
    """
    True if the normalized needle occurs in the photo text or in the name
    of one of its tags. Orphan tags have no name and never match.
    """
    if needle in normalize(photo.text):
        return True
    for tag_id in photo.tag_set:
        tag = index.find_tag(tag_id)
        if tag is not None and needle in normalize(tag.name):
            return True
    return False


def filter_by_text(photos: Iterable[Photo], query: str, index: TagIndex) -> list[Photo]:
    needle = normalize(query.strip())
    if not needle:
        return list(photos)
    return [photo for photo in photos if matches_text(photo, needle, index)]


def filter_photos(photos: Sequence[Photo], state: FilterState, index: TagIndex) -> list[Photo]:
    """
    Apply the tab, facet and text stages to a catalog snapshot.

    Args:
        photos: Catalog photos in display order
        state: Current filter selections
        index: Tag index of the current taxonomy

    Returns:
        Matching photos, in catalog order
    """
    result = filter_by_tab(photos, state.active_tab, index)
    result = filter_by_facets(result, state.selected_facets)
    return filter_by_text(result, state.search_query, index)
