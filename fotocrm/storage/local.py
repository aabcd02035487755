"""
Local filesystem slot store.
Each slot is a small JSON file holding the value and its expiry time.
"""

import json
import logging
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from fotocrm.config import get_settings
from fotocrm.core.exceptions import StorageException
from fotocrm.storage.base import SlotStore

logger = logging.getLogger(__name__)

_SLOT_NAME = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileSlotStore(SlotStore):
    """
    Slot store backed by one JSON file per slot.

    Files live under the configured LOCAL_STATE_PATH directory.
    """

    def __init__(self, base_path: str | None = None, default_ttl: timedelta | None = None):
        """
        Initialize the file slot store.

        Args:
            base_path: Directory for slot files. Defaults to settings.LOCAL_STATE_PATH
            default_ttl: Retention for writes without an explicit ttl.
                Defaults to settings.LOCAL_STATE_TTL_DAYS
        """
        settings = get_settings()
        self.base_path = Path(base_path or settings.LOCAL_STATE_PATH)
        self.default_ttl = default_ttl or timedelta(days=settings.LOCAL_STATE_TTL_DAYS)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, name: str) -> Path:
        if not _SLOT_NAME.match(name):
            raise StorageException(
                message=f"Invalid slot name: {name}",
                details={"name": name},
            )
        return self.base_path / f"{name}.json"

    async def get(self, name: str) -> Any | None:
        full_path = self._get_full_path(name)
        if not full_path.exists():
            return None

        try:
            async with aiofiles.open(full_path, "r", encoding="utf-8") as f:
                envelope = json.loads(await f.read())
            expires_at = datetime.fromisoformat(envelope["expires_at"])
            value = envelope["value"]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable slot '{name}': {e}")
            return None

        if expires_at <= datetime.now(timezone.utc):
            logger.info(f"Slot '{name}' expired at {expires_at.isoformat()}")
            await self.delete(name)
            return None

        return value

    async def set(self, name: str, value: Any, ttl: timedelta | None = None) -> None:
        full_path = self._get_full_path(name)
        expires_at = datetime.now(timezone.utc) + (ttl or self.default_ttl)
        envelope = {"value": value, "expires_at": expires_at.isoformat()}

        try:
            tmp_path = full_path.with_suffix(".tmp")
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(envelope, ensure_ascii=False))
            await aiofiles.os.replace(tmp_path, full_path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageException(
                message=f"Failed to write slot: {str(e)}",
                details={"name": name},
            )

    async def delete(self, name: str) -> bool:
        full_path = self._get_full_path(name)
        if not full_path.exists():
            return False

        try:
            await aiofiles.os.remove(full_path)
            return True
        except OSError as e:
            raise StorageException(
                message=f"Failed to delete slot: {str(e)}",
                details={"name": name},
            )
