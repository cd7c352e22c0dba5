"""PostgreSQL implementation of Answer repository.

Votes are stored one row per voter in ``answer_votes``. The primary key on
(answer_id, user_id) decides whether a toggle actually changes anything, and
the ``votes`` counter is only moved when a row was inserted or deleted.
"""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from fakeso.domain.model import Answer, Comment
from fakeso.domain.repository import AnswerRepository
from fakeso.domain.value import AnswerId, UserId
from fakeso.persistence.mappers import (
    answer_to_dict,
    comment_to_dict,
    row_to_answer,
    row_to_comment,
)
from fakeso.persistence.tables import (
    answer_comments_table,
    answer_votes_table,
    answers_table,
)


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        answers = await self.find_by_ids([answer_id])
        return answers[0] if answers else None

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> List[Answer]:
        """Find answers with their voters and comments, three queries total."""
        if not answer_ids:
            return []

        ids = list(answer_ids)
        rows = (
            await self.session.execute(
                select(answers_table).where(answers_table.c.id.in_(ids))
            )
        ).fetchall()
        if not rows:
            return []

        voters: dict[UUID, list[UUID]] = defaultdict(list)
        vote_stmt = select(
            answer_votes_table.c.answer_id, answer_votes_table.c.user_id
        ).where(answer_votes_table.c.answer_id.in_(ids))
        for row in (await self.session.execute(vote_stmt)).fetchall():
            voters[row.answer_id].append(row.user_id)

        comments: dict[UUID, list[Comment]] = defaultdict(list)
        comment_stmt = (
            select(answer_comments_table)
            .where(answer_comments_table.c.answer_id.in_(ids))
            .order_by(answer_comments_table.c.position)
        )
        for row in (await self.session.execute(comment_stmt)).fetchall():
            comments[row.answer_id].append(row_to_comment(row._asdict()))

        return [
            row_to_answer(row._asdict(), voters[row.id], comments[row.id])
            for row in rows
        ]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            await self.session.execute(
                insert(answers_table).values(**answer_to_dict(answer))
            )
            await self.session.flush()
            return answer

    async def _exists(self, answer_id: AnswerId) -> bool:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.id == answer_id)
        )
        return ((await self.session.execute(stmt)).scalar() or 0) > 0

    async def add_voter(self, answer_id: AnswerId, user_id: UserId) -> Optional[Answer]:
        """Insert a vote row and, if it is new, increment the counter."""
        with logfire.span(
            "answer_repository.add_voter",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            if not await self._exists(answer_id):
                return None

            stmt = (
                pg_insert(answer_votes_table)
                .values(answer_id=answer_id, user_id=user_id)
                .on_conflict_do_nothing(constraint="pk_answer_votes")
                .returning(answer_votes_table.c.answer_id)
            )
            inserted = (await self.session.execute(stmt)).fetchone()
            if inserted:
                await self.session.execute(
                    update(answers_table)
                    .where(answers_table.c.id == answer_id)
                    .values(votes=answers_table.c.votes + 1)
                )
            else:
                logfire.info("Vote already recorded", answer_id=str(answer_id))
            return await self.find_by_id(answer_id)

    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId
    ) -> Optional[Answer]:
        """Delete a vote row and, if one existed, decrement the counter."""
        with logfire.span(
            "answer_repository.remove_voter",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            if not await self._exists(answer_id):
                return None

            stmt = (
                delete(answer_votes_table)
                .where(
                    answer_votes_table.c.answer_id == answer_id,
                    answer_votes_table.c.user_id == user_id,
                )
                .returning(answer_votes_table.c.answer_id)
            )
            deleted = (await self.session.execute(stmt)).fetchone()
            if deleted:
                await self.session.execute(
                    update(answers_table)
                    .where(answers_table.c.id == answer_id)
                    .values(votes=func.greatest(answers_table.c.votes - 1, 0))
                )
            else:
                logfire.info("No vote to remove", answer_id=str(answer_id))
            return await self.find_by_id(answer_id)

    async def append_comment(
        self, answer_id: AnswerId, comment: Comment
    ) -> Optional[Answer]:
        """Insert a comment row; its identity position fixes the order."""
        with logfire.span(
            "answer_repository.append_comment",
            answer_id=str(answer_id),
            comment_id=str(comment.id),
        ):
            if not await self._exists(answer_id):
                return None

            await self.session.execute(
                insert(answer_comments_table).values(
                    **comment_to_dict(answer_id, comment)
                )
            )
            return await self.find_by_id(answer_id)
