"""
Configurator bucket state.

BucketStore owns the five buckets and the active index. Every mutation is
synchronous and keeps ``photo_configs`` keyed exactly by ``selected_photos``.
"""

import enum
import logging
from typing import Any

from fotocrm.core.exceptions import ValidationException
from fotocrm.schemas.configuration import (
    BUCKET_COUNT,
    MAX_PHOTOS_PER_BUCKET,
    PHOTO_CONFIG_FIELDS,
    Bucket,
    BucketCollection,
    PhotoConfig,
)

logger = logging.getLogger(__name__)


class SelectResult(str, enum.Enum):
    """Outcome of a select request."""
    ADDED = "added"
    ALREADY_SELECTED = "already_selected"
    LIMIT_REACHED = "limit_reached"


class BucketStore:
    """Fixed array of buckets plus the index of the one being edited."""

    def __init__(self, collection: BucketCollection | None = None, active_index: int = 0):
        self._collection = collection if collection is not None else BucketCollection()
        self._active_index = active_index if 0 <= active_index < BUCKET_COUNT else 0

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_bucket(self) -> Bucket:
        return self._collection[self._active_index]

    @property
    def buckets(self) -> BucketCollection:
        return self._collection

    def snapshot(self) -> BucketCollection:
        """Deep copy of the collection, safe to serialize or send."""
        return self._collection.model_copy(deep=True)

    def is_selected(self, photo_id: str) -> bool:
        return photo_id in self.active_bucket.photo_configs

    def is_full(self, index: int | None = None) -> bool:
        bucket = self.active_bucket if index is None else self._bucket_at(index)
        return len(bucket.selected_photos) >= MAX_PHOTOS_PER_BUCKET

    def select(self, photo_id: str) -> SelectResult:
        """
        Add a photo to the active bucket with a default configuration.

        A bucket at capacity is left untouched and LIMIT_REACHED is returned
        so the caller can tell the user.
        """
        bucket = self.active_bucket
        if photo_id in bucket.photo_configs:
            return SelectResult.ALREADY_SELECTED
        if len(bucket.selected_photos) >= MAX_PHOTOS_PER_BUCKET:
            logger.debug(f"Bucket {self._active_index} full, rejected {photo_id}")
            return SelectResult.LIMIT_REACHED

        bucket.selected_photos.append(photo_id)
        bucket.photo_configs[photo_id] = PhotoConfig()
        return SelectResult.ADDED

    def deselect(self, photo_id: str) -> bool:
        """Remove a photo and its configuration from the active bucket."""
        bucket = self.active_bucket
        if photo_id not in bucket.photo_configs:
            return False
        bucket.selected_photos.remove(photo_id)
        del bucket.photo_configs[photo_id]
        return True

    def toggle(self, photo_id: str) -> SelectResult | None:
        """Checkbox semantics: deselect if selected (returns None), else select."""
        if self.deselect(photo_id):
            return None
        return self.select(photo_id)

    def switch_active(self, index: int) -> None:
        self._bucket_at(index)
        self._active_index = index

    def clear(self, index: int) -> None:
        """Empty one bucket. Clearing the active bucket moves focus to bucket 0."""
        self._collection.buckets[self._checked(index)] = Bucket()
        if index == self._active_index:
            self._active_index = 0

    def clear_all(self) -> None:
        self._collection = BucketCollection()
        self._active_index = 0

    def replace(self, collection: BucketCollection, active_index: int = 0) -> None:
        """Adopt another collection wholesale (e.g. a loaded share)."""
        self._collection = collection
        self._active_index = active_index if 0 <= active_index < BUCKET_COUNT else 0

    def update_config(self, photo_id: str, field: str, value: Any) -> bool:
        """
        Set one field of a selected photo's configuration.

        Returns False without raising when the photo is not in the active
        bucket, the field is unknown or the value has the wrong type.
        """
        config = self.active_bucket.photo_configs.get(photo_id)
        if config is None or field not in PHOTO_CONFIG_FIELDS:
            return False
        try:
            setattr(config, field, value)
        except ValueError:
            logger.debug(f"Ignored invalid value for {field}: {value!r}")
            return False
        return True

    def _checked(self, index: int) -> int:
        if not 0 <= index < BUCKET_COUNT:
            raise ValidationException(
                message=f"Bucket index must be between 0 and {BUCKET_COUNT - 1}",
                details={"index": index},
            )
        return index

    def _bucket_at(self, index: int) -> Bucket:
        return self._collection[self._checked(index)]

    def __repr__(self) -> str:
        counts = [len(bucket.selected_photos) for bucket in self._collection.buckets]
        return f"<BucketStore(active={self._active_index}, counts={counts})>"
