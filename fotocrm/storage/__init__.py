"""
Client-side durable storage for FotoCRM.
Named key/value slots with long retention.
"""

from fotocrm.storage.base import SlotStore
from fotocrm.storage.local import FileSlotStore
from fotocrm.storage.factory import get_slot_store

__all__ = [
    "SlotStore",
    "FileSlotStore",
    "get_slot_store",
]
