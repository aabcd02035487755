"""
Configurator session: the single owner of a BucketStore.

Every mutation is applied synchronously to the store and then written to
the durable local slots. Remote save/load go through the configuration
store client; their failures never touch local state.
"""

import logging
from typing import Any, Iterable

import httpx

from fotocrm.clients.http import RemoteConfigurationClient
from fotocrm.config import get_settings
from fotocrm.configurator.bucket_store import BucketStore, SelectResult
from fotocrm.configurator.persistence import LocalStatePersistence
from fotocrm.core.exceptions import (
    ConfigurationNotFoundException,
    RemoteStoreException,
    SaveInProgressException,
)
from fotocrm.schemas.catalog import Photo
from fotocrm.storage.factory import get_slot_store

logger = logging.getLogger(__name__)

SELECTION_TEXT_SEPARATOR = "\n\n---\n\n"


def share_code_from_url(url: str | None, param: str | None = None) -> str | None:
    """Extract the share code query parameter from a URL, if present."""
    if not url:
        return None
    param = param or get_settings().SHARE_CODE_PARAM
    try:
        code = httpx.URL(url).params.get(param)
    except httpx.InvalidURL:
        logger.warning(f"Ignoring malformed URL: {url}")
        return None
    return (code.strip() or None) if code else None


class ConfiguratorSession:
    """
    Controller tying bucket state to local durability and remote sharing.

    Usage:
        session = ConfiguratorSession(LocalStatePersistence(store), RemoteConfigurationClient())
        await session.start(url)
        await session.select("photo-1")
        code = await session.save()
    """

    def __init__(
        self,
        persistence: LocalStatePersistence,
        remote: RemoteConfigurationClient,
        store: BucketStore | None = None,
        share_code_param: str | None = None,
    ):
        self.persistence = persistence
        self.remote = remote
        self.store = store or BucketStore()
        self.share_code_param = share_code_param or get_settings().SHARE_CODE_PARAM

        self.share_code: str | None = None
        self.configurator_open = False
        self.last_error: str | None = None

        self._saving = False
        self._requested_code: str | None = None
        # Bumped whenever the held share code is abandoned
        self._lineage = 0
        self._closed = False

    @classmethod
    def create(cls, remote: RemoteConfigurationClient | None = None) -> "ConfiguratorSession":
        """Build a session on the configured slot store and remote API."""
        persistence = LocalStatePersistence(get_slot_store())
        return cls(persistence, remote or RemoteConfigurationClient())

    @property
    def is_saving(self) -> bool:
        return self._saving

    async def start(self, url: str | None = None) -> None:
        """Restore local state, then adopt a shared configuration if the URL carries one."""
        state = await self.persistence.load()
        self.store.replace(state.buckets, state.active_index)
        self.share_code = state.share_code

        code = share_code_from_url(url, self.share_code_param)
        if code:
            await self.load_shared(code)

    def close(self) -> None:
        """Tear down; responses still in flight are discarded."""
        self._closed = True

    # Bucket mutations

    async def select(self, photo_id: str) -> SelectResult:
        result = self.store.select(photo_id)
        if result is SelectResult.ADDED:
            await self.persistence.save_buckets(self.store.buckets)
        return result

    async def deselect(self, photo_id: str) -> bool:
        removed = self.store.deselect(photo_id)
        if removed:
            await self.persistence.save_buckets(self.store.buckets)
        return removed

    async def toggle(self, photo_id: str) -> SelectResult | None:
        result = self.store.toggle(photo_id)
        if result is None or result is SelectResult.ADDED:
            await self.persistence.save_buckets(self.store.buckets)
        return result

    async def switch_active(self, index: int) -> None:
        self.store.switch_active(index)
        await self.persistence.save_active_index(self.store.active_index)

    async def clear(self, index: int) -> None:
        self.store.clear(index)
        await self.persistence.save_buckets(self.store.buckets)
        await self.persistence.save_active_index(self.store.active_index)

    async def clear_all(self) -> None:
        """Empty every bucket and drop the held share code."""
        self.store.clear_all()
        self._abandon_share_code()
        await self._persist_all()

    async def new_share(self) -> None:
        """Keep the buckets but mint a new code on the next save."""
        self._abandon_share_code()
        await self.persistence.save_share_code(None)

    async def update_config(self, photo_id: str, field: str, value: Any) -> bool:
        updated = self.store.update_config(photo_id, field, value)
        if updated:
            await self.persistence.save_buckets(self.store.buckets)
        return updated

    # Remote sync

    async def save(self) -> str:
        """
        Save the current buckets remotely, reusing the held share code.

        Returns:
            The share code of the saved configuration

        Raises:
            SaveInProgressException: If a save is already in flight
            RemoteStoreException: If the remote store fails; local state is unchanged
        """
        if self._saving:
            raise SaveInProgressException()

        self._saving = True
        lineage = self._lineage
        try:
            code = await self.remote.save(self.store.snapshot(), self.share_code)
        except RemoteStoreException as e:
            self.last_error = e.message
            logger.warning(f"Remote save failed: {e.message}")
            raise
        finally:
            self._saving = False

        if self._closed or lineage != self._lineage:
            logger.info(f"Discarding save response for abandoned code {code}")
            return code

        self.share_code = code
        self.last_error = None
        await self.persistence.save_share_code(code)
        logger.info(f"Configuration saved under code {code}")
        return code

    async def load_shared(self, code: str) -> bool:
        """
        Load a shared configuration and adopt it as current state.

        Only the response for the most recently requested code is applied.
        A miss or a network failure records ``last_error`` and keeps the
        current buckets.

        Returns:
            True if the loaded buckets were adopted
        """
        self._requested_code = code
        try:
            collection = await self.remote.load(code)
        except (ConfigurationNotFoundException, RemoteStoreException) as e:
            if not self._is_stale(code):
                self.last_error = e.message
                logger.warning(f"Could not load shared configuration {code}: {e.message}")
            return False

        if self._is_stale(code):
            logger.warning(f"Discarding stale load response for code {code}")
            return False

        self.store.replace(collection)
        # A save still in flight belongs to the replaced buckets
        self._abandon_share_code()
        self.share_code = code
        self.configurator_open = True
        self.last_error = None
        await self._persist_all()
        return True

    def share_url(self, base_url: str) -> str | None:
        """Link that reopens the held configuration, or None if nothing is saved."""
        if not self.share_code:
            return None
        return str(httpx.URL(base_url).copy_merge_params({self.share_code_param: self.share_code}))

    def selection_text(self, photos: Iterable[Photo]) -> str:
        """Texts of the active bucket's photos, in selection order."""
        by_id = {photo.id: photo for photo in photos}
        texts = [
            by_id[photo_id].text
            for photo_id in self.store.active_bucket.selected_photos
            if photo_id in by_id and by_id[photo_id].text
        ]
        return SELECTION_TEXT_SEPARATOR.join(texts)

    def _abandon_share_code(self) -> None:
        self.share_code = None
        self._lineage += 1

    def _is_stale(self, code: str) -> bool:
        return self._closed or code != self._requested_code

    async def _persist_all(self) -> None:
        await self.persistence.save_buckets(self.store.buckets)
        await self.persistence.save_active_index(self.store.active_index)
        await self.persistence.save_share_code(self.share_code)
