"""
Abstract durable slot store.
Defines the contract for client-side key/value persistence with expiry.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any


class SlotStore(ABC):
    """
    Abstract base class for named, expiring key/value slots.

    Values are JSON-compatible. A slot that is missing, expired or
    unreadable reads as ``None``; reading never raises.
    """

    @abstractmethod
    async def get(self, name: str) -> Any | None:
        """
        Read a slot.

        Args:
            name: Slot name (e.g. "buckets")

        Returns:
            The stored value, or None if absent, expired or corrupt
        """
        pass

    @abstractmethod
    async def set(self, name: str, value: Any, ttl: timedelta | None = None) -> None:
        """
        Write a slot.

        Args:
            name: Slot name
            value: JSON-compatible value
            ttl: Retention; the store default when omitted

        Raises:
            StorageException: If the write fails
        """
        pass

    @abstractmethod
    async def delete(self, name: str) -> bool:
        """
        Remove a slot.

        Returns:
            True if a slot was removed, False if it did not exist
        """
        pass
