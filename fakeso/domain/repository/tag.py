"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fakeso.domain.model.tag import Tag
from fakeso.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag

        Raises:
            IntegrityError: If a tag with the same name key already exists
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, case-insensitively.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by name in a single query (case-insensitive).

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            List of found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name.

        Returns:
            List of tags
        """
        pass
