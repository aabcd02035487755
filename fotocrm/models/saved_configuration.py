"""
SavedConfiguration SQLAlchemy model.
A bucket snapshot addressable by its share code.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from fotocrm.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SavedConfiguration(Base):
    """
    Remote copy of a configurator bucket collection.

    The code is minted on first save and reused for every later save of
    the same session lineage (upsert).
    """
    __tablename__ = "saved_configurations"

    code: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        comment="Opaque share code",
    )
    buckets: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        comment="Serialized buckets (selectedPhotos / photoConfigs)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<SavedConfiguration(code={self.code})>"
