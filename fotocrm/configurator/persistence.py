"""
Durable local state of the configurator.

Three independent slots are kept: the active bucket index, the bucket
collection as a JSON blob and the share code. Any slot that cannot be read
falls back to its default; reading never raises.
"""

import json
import logging

from pydantic import BaseModel, ValidationError

from fotocrm.schemas.configuration import BUCKET_COUNT, Bucket, BucketCollection
from fotocrm.storage.base import SlotStore

logger = logging.getLogger(__name__)

ACTIVE_BUCKET_SLOT = "active_bucket"
BUCKETS_SLOT = "buckets"
SHARE_CODE_SLOT = "share_code"


def serialize_buckets(collection: BucketCollection) -> str:
    """Encode a collection as the JSON blob stored in the buckets slot."""
    return json.dumps(
        [bucket.model_dump(by_alias=True) for bucket in collection.buckets],
        ensure_ascii=False,
    )


def deserialize_buckets(blob: str | None) -> BucketCollection:
    """
    Decode a buckets blob. Missing or corrupt data yields a fresh,
    empty collection.
    """
    if not blob:
        return BucketCollection()
    try:
        raw = json.loads(blob)
        if not isinstance(raw, list):
            raise ValueError("bucket blob is not a list")
        return BucketCollection(buckets=[Bucket.model_validate(item) for item in raw])
    except (ValueError, TypeError, ValidationError) as e:
        logger.warning(f"Discarding corrupt bucket state: {e}")
        return BucketCollection()


class LocalState(BaseModel):
    """Everything restored from the durable slots at startup."""

    buckets: BucketCollection
    active_index: int = 0
    share_code: str | None = None


class LocalStatePersistence:
    """Reads and writes the configurator slots of a SlotStore."""

    def __init__(self, store: SlotStore):
        self.store = store

    async def load(self) -> LocalState:
        buckets = deserialize_buckets(await self._read_str(BUCKETS_SLOT))

        active_index = await self.store.get(ACTIVE_BUCKET_SLOT)
        valid = (
            type(active_index) is int
            and 0 <= active_index < BUCKET_COUNT
        )
        if not valid:
            if active_index is not None:
                logger.warning(f"Discarding invalid active bucket index: {active_index!r}")
            active_index = 0

        share_code = await self._read_str(SHARE_CODE_SLOT) or None

        return LocalState(buckets=buckets, active_index=active_index, share_code=share_code)

    async def save_buckets(self, collection: BucketCollection) -> None:
        await self.store.set(BUCKETS_SLOT, serialize_buckets(collection))

    async def save_active_index(self, index: int) -> None:
        await self.store.set(ACTIVE_BUCKET_SLOT, index)

    async def save_share_code(self, code: str | None) -> None:
        if code:
            await self.store.set(SHARE_CODE_SLOT, code)
        else:
            await self.store.delete(SHARE_CODE_SLOT)

    async def save(self, state: LocalState) -> None:
        await self.save_buckets(state.buckets)
        await self.save_active_index(state.active_index)
        await self.save_share_code(state.share_code)

    async def _read_str(self, name: str) -> str | None:
        value = await self.store.get(name)
        if value is None or isinstance(value, str):
            return value
        logger.warning(f"Discarding non-text value in slot '{name}'")
        return None
