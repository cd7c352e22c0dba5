"""Tag domain service."""

from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from fakeso.config import ContentSettings
from fakeso.domain.error import DataIntegrityError, InvalidInputError
from fakeso.domain.model.common import utc_now
from fakeso.domain.model.tag import Tag, TagCount
from fakeso.domain.repository import QuestionRepository, TagRepository
from fakeso.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self,
        tag_repository: TagRepository,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            question_repository: Question repository (for per-tag counts)
            content_settings: Content limits
        """
        self.tag_repository = tag_repository
        self.question_repository = question_repository
        self.content_settings = content_settings

    def parse_names(self, names: Sequence[str]) -> list[TagName]:
        """Validate tag names and drop case-insensitive duplicates.

        Args:
            names: Raw tag names

        Returns:
            Distinct tag names in order of first occurrence

        Raises:
            InvalidInputError: If a name is blank, too long or contains whitespace
        """
        parsed: list[TagName] = []
        seen: set[str] = set()
        for raw in names:
            try:
                name = TagName(raw)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid tag name {raw!r}") from e
            if len(name.root) > self.content_settings.max_tag_length:
                raise InvalidInputError(
                    f"Tag name longer than {self.content_settings.max_tag_length} "
                    f"characters: {raw!r}"
                )
            if name.key in seen:
                continue
            seen.add(name.key)
            parsed.append(name)
        return parsed

    async def resolve_or_create(self, names: Sequence[str]) -> list[Tag]:
        """Return the tag for each name, creating missing ones.

        Names are matched case-insensitively, so "React" and "react" resolve
        to the same tag. Output order follows first occurrence.

        Args:
            names: Raw tag names

        Returns:
            One tag per distinct name

        Raises:
            InvalidInputError: If a name is invalid
        """
        with logfire.span("tag_service.resolve_or_create", tags=list(names)):
            parsed = self.parse_names(names)
            if not parsed:
                return []

            existing = {
                tag.key: tag for tag in await self.tag_repository.find_by_names(parsed)
            }

            tags = []
            created = 0
            for name in parsed:
                tag = existing.get(name.key)
                if tag is None:
                    tag = await self._create(name)
                    created += 1
                tags.append(tag)

            logfire.info("Tags resolved", count=len(tags), created=created)
            return tags

    async def _create(self, name: TagName) -> Tag:
        tag = Tag(id=TagId(uuid4()), name=name, created_at=utc_now())
        try:
            saved = await self.tag_repository.save(tag)
            logfire.info("Tag created", tag_name=name.root, tag_id=str(saved.id))
            return saved
        except IntegrityError:
            # Created concurrently by another request; use theirs
            logfire.warn("Tag already exists, re-fetching", tag_name=name.root)
            winner = await self.tag_repository.find_by_name(name)
            if winner is None:
                raise DataIntegrityError(
                    f"Tag {name.root!r} conflicted on insert but cannot be found"
                )
            return winner

    async def get_tags_by_ids(self, tag_ids: Sequence[TagId]) -> dict[TagId, Tag]:
        """Load tags by ID.

        Args:
            tag_ids: Tag IDs

        Returns:
            Mapping of tag ID to tag, for the IDs that exist
        """
        if not tag_ids:
            return {}
        tags = await self.tag_repository.find_by_ids(list(dict.fromkeys(tag_ids)))
        return {tag.id: tag for tag in tags}

    async def count_questions_per_tag(self) -> list[TagCount]:
        """Every tag with the number of questions that reference it.

        Tags no question uses are reported with a count of 0.

        Returns:
            Tag counts ordered by tag name
        """
        with logfire.span("tag_service.count_questions_per_tag"):
            tags = await self.tag_repository.find_all()
            counts = await self.question_repository.count_by_tag()
            result = [
                TagCount(tag=tag, question_count=counts.get(tag.id, 0)) for tag in tags
            ]
            logfire.info("Tag counts computed", tags=len(result))
            return result
