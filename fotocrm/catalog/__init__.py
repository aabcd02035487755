"""Taxonomy indexing, faceted filtering and the catalog browser."""

from fotocrm.catalog.tag_index import (
    FACET_GROUP_IDS,
    OTHER_TAB_ID,
    PRIMARY_TAB_COUNT,
    TIPO_GROUP_ID,
    UNKNOWN_GROUP_ID,
    TagIndex,
)
from fotocrm.catalog.filters import FilterState, filter_photos
from fotocrm.catalog.browser import CatalogBrowser

__all__ = [
    "FACET_GROUP_IDS",
    "OTHER_TAB_ID",
    "PRIMARY_TAB_COUNT",
    "TIPO_GROUP_ID",
    "UNKNOWN_GROUP_ID",
    "TagIndex",
    "FilterState",
    "filter_photos",
    "CatalogBrowser",
]
