"""
Pydantic schemas for the catalog, the configurator and API responses.
"""

from fotocrm.schemas.catalog import (
    Tag,
    TagGroup,
    Photo,
    Tab,
    ResolvedTag,
    TagGroupListResponse,
    PhotoListResponse,
    PhotoSearchResponse,
)
from fotocrm.schemas.configuration import (
    BUCKET_COUNT,
    MAX_PHOTOS_PER_BUCKET,
    PHOTO_CONFIG_FIELDS,
    PhotoConfig,
    Bucket,
    BucketCollection,
    SaveConfigurationRequest,
    SaveConfigurationResponse,
    LoadConfigurationResponse,
)
from fotocrm.schemas.error import ErrorResponse

__all__ = [
    # Catalog schemas
    "Tag",
    "TagGroup",
    "Photo",
    "Tab",
    "ResolvedTag",
    "TagGroupListResponse",
    "PhotoListResponse",
    "PhotoSearchResponse",
    # Configurator schemas
    "BUCKET_COUNT",
    "MAX_PHOTOS_PER_BUCKET",
    "PHOTO_CONFIG_FIELDS",
    "PhotoConfig",
    "Bucket",
    "BucketCollection",
    "SaveConfigurationRequest",
    "SaveConfigurationResponse",
    "LoadConfigurationResponse",
    # Error schemas
    "ErrorResponse",
]
