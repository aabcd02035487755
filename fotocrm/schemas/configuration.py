"""
Pydantic schemas for configurator buckets and saved configurations.

A Bucket always pairs ``selected_photos`` with ``photo_configs``; the
validators below enforce that pairing at construction time.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_PHOTOS_PER_BUCKET = 6
BUCKET_COUNT = 5


class PhotoConfig(BaseModel):
    """Per-photo configuration attached to a selection."""

    forma: bool = False
    acero: bool = False
    encabado: bool = False
    detalle1: bool = False
    detalle2: bool = False
    detalle3: bool = False
    comentarios: str = ""

    model_config = ConfigDict(validate_assignment=True)


PHOTO_CONFIG_FIELDS = frozenset(PhotoConfig.model_fields)


class Bucket(BaseModel):
    """One selection slot of the configurator."""

    selected_photos: list[str] = Field(default_factory=list, alias="selectedPhotos")
    photo_configs: dict[str, PhotoConfig] = Field(default_factory=dict, alias="photoConfigs")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("selected_photos")
    @classmethod
    def _unique_and_capped(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("selectedPhotos must not contain duplicates")
        if len(value) > MAX_PHOTOS_PER_BUCKET:
            raise ValueError(f"a bucket holds at most {MAX_PHOTOS_PER_BUCKET} photos")
        return value

    @model_validator(mode="after")
    def _pair_configs(self) -> "Bucket":
        stray = set(self.photo_configs) - set(self.selected_photos)
        if stray:
            raise ValueError(f"photoConfigs for unselected photos: {sorted(stray)}")
        for photo_id in self.selected_photos:
            self.photo_configs.setdefault(photo_id, PhotoConfig())
        return self


def _empty_buckets() -> list[Bucket]:
    return [Bucket() for _ in range(BUCKET_COUNT)]


class BucketCollection(BaseModel):
    """The fixed set of five buckets."""

    buckets: list[Bucket] = Field(default_factory=_empty_buckets)

    @field_validator("buckets")
    @classmethod
    def _fixed_length(cls, value: list[Bucket]) -> list[Bucket]:
        if len(value) != BUCKET_COUNT:
            raise ValueError(f"exactly {BUCKET_COUNT} buckets are required, got {len(value)}")
        return value

    def __getitem__(self, index: int) -> Bucket:
        return self.buckets[index]

    def __len__(self) -> int:
        return len(self.buckets)


class SaveConfigurationRequest(BaseModel):
    """Request body for saving a bucket snapshot."""

    buckets: list[Bucket]
    code: str | None = Field(default=None, max_length=32)


class SaveConfigurationResponse(BaseModel):
    """Share code under which the snapshot was stored."""

    code: str


class LoadConfigurationResponse(BaseModel):
    """A previously saved bucket snapshot."""

    code: str
    buckets: list[Bucket]
