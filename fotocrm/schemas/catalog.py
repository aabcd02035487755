"""
Pydantic schemas for the photo catalog and its tag taxonomy.
"""

from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
    """A single taxonomy tag."""

    id: str
    name: str


class TagGroup(BaseModel):
    """
    A curated group of tags (e.g. "tipo", "encabado", "acero", "extras").

    Tag order inside a group is authoritative: the first tags of the
    "tipo" group become the primary tabs.
    """

    id: str
    name: str
    tags: list[Tag] = Field(default_factory=list)


class Photo(BaseModel):
    """A catalog photo. ``tags`` holds tag ids and behaves as a set."""

    id: str
    url: str = ""
    text: str = ""
    tags: list[str] = Field(default_factory=list)

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)


class TagGroupListResponse(BaseModel):
    """Response schema for the taxonomy."""

    tag_groups: list[TagGroup]


class PhotoListResponse(BaseModel):
    """Response schema for photo listings."""

    photos: list[Photo]


class PhotoSearchResponse(BaseModel):
    """Response schema for filtered photo listings."""

    photos: list[Photo]
    total: int


class Tab(BaseModel):
    """A primary classification tab derived from the "tipo" group."""

    id: str
    label: str


class ResolvedTag(BaseModel):
    """Display name and owning group of a photo tag id."""

    name: str
    group_id: str = Field(alias="groupId")

    model_config = ConfigDict(populate_by_name=True)
