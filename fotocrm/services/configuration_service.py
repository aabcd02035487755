"""
Configuration service - Remote store for shared bucket snapshots.
"""

import logging
import re
import secrets

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fotocrm.config import get_settings
from fotocrm.core.exceptions import (
    ConfigurationNotFoundException,
    StorageException,
    ValidationException,
)
from fotocrm.models.saved_configuration import SavedConfiguration
from fotocrm.schemas.configuration import Bucket, BucketCollection

logger = logging.getLogger(__name__)

# Excludes 0, O, 1, I and L
SHARE_CODE_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"
SHARE_CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]{4,32}$")
MAX_CODE_ATTEMPTS = 10


def generate_share_code(length: int | None = None) -> str:
    """Mint a random share code."""
    length = length or get_settings().SHARE_CODE_LENGTH
    return "".join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(length))


def validate_share_code(code: str) -> str:
    if not SHARE_CODE_PATTERN.match(code):
        raise ValidationException(
            message="Invalid share code",
            details={"code": code},
        )
    return code


class ConfigurationService:
    """Service class for saved configuration operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, buckets: list[Bucket], code: str | None = None) -> str:
        """
        Upsert a bucket snapshot.

        Args:
            buckets: The five buckets to store
            code: Existing share code; overwritten (or created) in place when given

        Returns:
            Share code of the stored snapshot

        Raises:
            ValidationException: If the snapshot or the code is malformed
        """
        collection = self._collection(buckets)
        payload = [bucket.model_dump(by_alias=True) for bucket in collection.buckets]

        if code:
            validate_share_code(code)
            record = await self.db.get(SavedConfiguration, code)
            if record is not None:
                record.buckets = payload
                await self.db.flush()
                logger.info(f"Updated configuration {code}")
                return code
        else:
            code = await self._mint_code()

        self.db.add(SavedConfiguration(code=code, buckets=payload))
        await self.db.flush()
        logger.info(f"Created configuration {code}")
        return code

    async def load(self, code: str) -> BucketCollection:
        """
        Get a saved snapshot by share code.

        Raises:
            ConfigurationNotFoundException: If no snapshot is stored under the code
        """
        if not SHARE_CODE_PATTERN.match(code):
            raise ConfigurationNotFoundException(code)

        result = await self.db.execute(
            select(SavedConfiguration).where(SavedConfiguration.code == code)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise ConfigurationNotFoundException(code)

        return BucketCollection(buckets=[Bucket.model_validate(item) for item in record.buckets])

    async def _mint_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_share_code()
            if await self.db.get(SavedConfiguration, code) is None:
                return code
        raise StorageException(message="Could not allocate a unique share code")

    @staticmethod
    def _collection(buckets: list[Bucket]) -> BucketCollection:
        try:
            return BucketCollection(buckets=buckets)
        except ValueError as e:
            raise ValidationException(message=str(e))
