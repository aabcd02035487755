"""
Slot store factory.
Provides the configured client-side durable store.
"""

from functools import lru_cache

from fotocrm.storage.base import SlotStore
from fotocrm.storage.local import FileSlotStore


@lru_cache
def get_slot_store() -> SlotStore:
    """
    Get the configured slot store.

    Uses LRU cache to ensure only one instance is created.
    """
    return FileSlotStore()
