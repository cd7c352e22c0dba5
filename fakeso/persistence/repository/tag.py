"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from fakeso.domain.model.tag import Tag
from fakeso.domain.repository.tag import TagRepository
from fakeso.domain.value import TagId, TagName
from fakeso.persistence.mappers import row_to_tag, tag_to_dict
from fakeso.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert runs in a SAVEPOINT so that a unique violation on
        ``name_key`` leaves the request transaction usable for the re-fetch.
        """
        with logfire.span("tag_repository.save", tag_name=tag.name.root):
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(tags_table).values(**tag_to_dict(tag))
                )
            return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, case-insensitively."""
        stmt = select(tags_table).where(tags_table.c.name_key == name.key)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name_key.in_([name.key for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(list(tag_ids)))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name_key)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
