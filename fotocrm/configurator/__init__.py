"""Bucket selection state, its local persistence and the configurator session."""

from fotocrm.configurator.bucket_store import BucketStore, SelectResult
from fotocrm.configurator.persistence import (
    LocalState,
    LocalStatePersistence,
    deserialize_buckets,
    serialize_buckets,
)
from fotocrm.configurator.session import ConfiguratorSession, share_code_from_url

__all__ = [
    "BucketStore",
    "SelectResult",
    "LocalState",
    "LocalStatePersistence",
    "deserialize_buckets",
    "serialize_buckets",
    "ConfiguratorSession",
    "share_code_from_url",
]
