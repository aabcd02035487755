"""
Lookup structures over the grouped tag taxonomy.

The index is immutable: build a new one whenever the taxonomy changes
(e.g. after a language switch).
"""

from typing import Iterable

from fotocrm.config import get_settings
from fotocrm.schemas.catalog import Photo, ResolvedTag, Tab, Tag, TagGroup

TIPO_GROUP_ID = "tipo"
FACET_GROUP_IDS = ("encabado", "acero", "extras")
OTHER_TAB_ID = "other"
UNKNOWN_GROUP_ID = "unknown"

# Positional convention over curated data: the first tags of "tipo" are tabs.
PRIMARY_TAB_COUNT = 3


class TagIndex:
    """Flattened view of a list of TagGroups, keyed by group and by tag id."""

    def __init__(self, tag_groups: Iterable[TagGroup], other_tab_label: str | None = None):
        self._groups: dict[str, TagGroup] = {}
        self._tags: dict[str, Tag] = {}
        self._tag_group: dict[str, str] = {}

        for group in tag_groups:
            self._groups[group.id] = group
            for tag in group.tags:
                # First occurrence wins if the curated data repeats an id
                if tag.id not in self._tags:
                    self._tags[tag.id] = tag
                    self._tag_group[tag.id] = group.id

        self.other_tab_label = other_tab_label or get_settings().OTHER_TAB_LABEL

    @property
    def groups(self) -> list[TagGroup]:
        return list(self._groups.values())

    def tags_of(self, group_id: str) -> list[Tag]:
        """Tags of a group in curated order; empty if the group is absent."""
        group = self._groups.get(group_id)
        return list(group.tags) if group else []

    def group_name(self, group_id: str) -> str:
        """Display name of a group, falling back to the raw id."""
        group = self._groups.get(group_id)
        return group.name if group else group_id

    def find_tag(self, tag_id: str) -> Tag | None:
        return self._tags.get(tag_id)

    def primary_tabs(self, group_id: str = TIPO_GROUP_ID) -> list[Tab]:
        """
        First PRIMARY_TAB_COUNT tags of the group as tabs, plus the
        synthetic "other" tab when the group holds more tags than that.
        """
        tags = self.tags_of(group_id)
        tabs = [Tab(id=tag.id, label=tag.name) for tag in tags[:PRIMARY_TAB_COUNT]]
        if len(tags) > PRIMARY_TAB_COUNT:
            tabs.append(Tab(id=OTHER_TAB_ID, label=self.other_tab_label))
        return tabs

    def other_tag_ids(self) -> list[str]:
        """Ids of the "tipo" tags that fall under the synthetic tab."""
        return [tag.id for tag in self.tags_of(TIPO_GROUP_ID)[PRIMARY_TAB_COUNT:]]

    def resolve_tag_name(self, tag_id: str) -> ResolvedTag:
        """
        Display name and group of a photo tag id.

        Ids absent from the taxonomy are stale references, reported under
        the "unknown" group with the raw id as name.
        """
        tag = self._tags.get(tag_id)
        if tag is None:
            return ResolvedTag(name=tag_id, group_id=UNKNOWN_GROUP_ID)
        return ResolvedTag(name=tag.name, group_id=self._tag_group[tag_id])

    def group_photo_tags(self, photo: Photo) -> dict[str, list[ResolvedTag]]:
        """A photo's tags grouped by owning group, orphans under "unknown"."""
        grouped: dict[str, list[ResolvedTag]] = {}
        seen: set[str] = set()
        for tag_id in photo.tags:
            if tag_id in seen:
                continue
            seen.add(tag_id)
            resolved = self.resolve_tag_name(tag_id)
            grouped.setdefault(resolved.group_id, []).append(resolved)
        return grouped

    def __contains__(self, tag_id: object) -> bool:
        return tag_id in self._tags

    def __repr__(self) -> str:
        return f"<TagIndex(groups={len(self._groups)}, tags={len(self._tags)})>"
