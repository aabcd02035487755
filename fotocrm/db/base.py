"""SQLAlchemy declarative base for the remote configuration store."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all FotoCRM ORM models."""
    pass
