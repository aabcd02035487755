"""Database module for the FotoCRM configuration store."""

from fotocrm.db.base import Base
from fotocrm.db.session import get_db, engine, AsyncSessionLocal

__all__ = ["Base", "get_db", "engine", "AsyncSessionLocal"]
