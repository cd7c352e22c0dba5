"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from fakeso.domain.model.tag import Tag
from fakeso.domain.repository.tag import TagRepository
from fakeso.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._key_index: dict[str, TagId] = {}

    async def save(self, tag: Tag) -> Tag:
        """Insert a tag.

        Raises:
            IntegrityError: If the name key is taken
        """
        if tag.key in self._key_index:
            raise IntegrityError("Duplicate tag name", None, Exception())
        self._tags[tag.id] = deepcopy(tag)
        self._key_index[tag.key] = tag.id
        return deepcopy(tag)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return deepcopy(tag) if tag else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, case-insensitively."""
        tag_id = self._key_index.get(name.key)
        if tag_id:
            return deepcopy(self._tags[tag_id])
        return None

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        tags = []
        for name in names:
            tag = await self.find_by_name(name)
            if tag:
                tags.append(tag)
        return tags

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [deepcopy(self._tags[tid]) for tid in tag_ids if tid in self._tags]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = sorted(self._tags.values(), key=lambda t: t.key)
        return [deepcopy(tag) for tag in tags]

    def remove(self, tag_id: TagId) -> None:
        """Drop a tag without checking references (simulates corruption)."""
        tag = self._tags.pop(tag_id, None)
        if tag:
            self._key_index.pop(tag.key, None)
