"""Core utilities and exceptions for FotoCRM."""

from fotocrm.core.exceptions import (
    FotoCRMException,
    ValidationException,
    PhotoNotFoundException,
    ConfigurationNotFoundException,
    SaveInProgressException,
    RemoteStoreException,
    StorageException,
)
from fotocrm.core.text import normalize

__all__ = [
    "FotoCRMException",
    "ValidationException",
    "PhotoNotFoundException",
    "ConfigurationNotFoundException",
    "SaveInProgressException",
    "RemoteStoreException",
    "StorageException",
    "normalize",
]
