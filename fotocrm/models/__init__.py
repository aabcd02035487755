"""
SQLAlchemy ORM models for the FotoCRM configuration store.
"""

from fotocrm.models.saved_configuration import SavedConfiguration

__all__ = [
    "SavedConfiguration",
]
