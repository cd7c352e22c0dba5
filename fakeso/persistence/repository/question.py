"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import desc, exists, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from fakeso.domain.model import Question
from fakeso.domain.repository import QuestionRepository
from fakeso.domain.value import AnswerId, QuestionId, TagId
from fakeso.persistence.mappers import question_to_dict, row_to_question
from fakeso.persistence.tables import (
    question_answers_table,
    question_tags_table,
    questions_table,
)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_relations(
        self, question_ids: list[UUID]
    ) -> tuple[dict[UUID, list[UUID]], dict[UUID, list[UUID]]]:
        """Fetch ordered tag and answer IDs for many questions at once.

        Returns:
            (question_id -> tag_ids, question_id -> answer_ids)
        """
        tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        answer_map: dict[UUID, list[UUID]] = defaultdict(list)
        if not question_ids:
            return tag_map, answer_map

        tag_stmt = (
            select(question_tags_table.c.question_id, question_tags_table.c.tag_id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(question_tags_table.c.position)
        )
        for row in (await self.session.execute(tag_stmt)).fetchall():
            tag_map[row.question_id].append(row.tag_id)

        answer_stmt = (
            select(
                question_answers_table.c.question_id, question_answers_table.c.answer_id
            )
            .where(question_answers_table.c.question_id.in_(question_ids))
            .order_by(question_answers_table.c.position)
        )
        for row in (await self.session.execute(answer_stmt)).fetchall():
            answer_map[row.question_id].append(row.answer_id)

        return tag_map, answer_map

    async def _to_questions(self, rows: list[Any]) -> List[Question]:
        ids = [row.id for row in rows]
        tag_map, answer_map = await self._fetch_relations(ids)
        return [
            row_to_question(row._asdict(), tag_map[row.id], answer_map[row.id])
            for row in rows
        ]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            row = (await self.session.execute(stmt)).fetchone()
            if not row:
                return None
            [question] = await self._to_questions([row])
            return question

    async def find_all(self, unanswered_only: bool = False) -> List[Question]:
        """Find questions, newest first."""
        with logfire.span(
            "question_repository.find_all", unanswered_only=unanswered_only
        ):
            stmt = select(questions_table)
            if unanswered_only:
                stmt = stmt.where(
                    ~exists().where(
                        question_answers_table.c.question_id == questions_table.c.id
                    )
                )
            stmt = stmt.order_by(desc(questions_table.c.asked_at))

            rows = (await self.session.execute(stmt)).fetchall()
            questions = await self._to_questions(rows)
            logfire.info("Found questions", count=len(questions))
            return questions

    async def save(self, question: Question) -> Question:
        """Insert a new question with its tag links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=[str(t) for t in question.tag_ids],
        ):
            await self.session.execute(
                insert(questions_table).values(**question_to_dict(question))
            )
            await self.session.execute(
                insert(question_tags_table),
                [
                    {"question_id": question.id, "tag_id": tag_id, "position": i}
                    for i, tag_id in enumerate(question.tag_ids)
                ],
            )
            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views using SQL."""
        with logfire.span(
            "question_repository.increment_views", question_id=str(question_id)
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .values(views=questions_table.c.views + 1)
                .returning(*questions_table.c)
            )
            row = (await self.session.execute(stmt)).fetchone()
            if not row:
                return None
            [question] = await self._to_questions([row])
            return question

    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer reference; a repeated reference is ignored."""
        with logfire.span(
            "question_repository.add_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            if await self.find_by_id(question_id) is None:
                return None

            stmt = (
                pg_insert(question_answers_table)
                .values(question_id=question_id, answer_id=answer_id)
                .on_conflict_do_nothing(constraint="uq_question_answer")
            )
            await self.session.execute(stmt)
            return await self.find_by_id(question_id)

    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per tag in a single grouped query."""
        stmt = select(
            question_tags_table.c.tag_id,
            func.count(question_tags_table.c.question_id).label("question_count"),
        ).group_by(question_tags_table.c.tag_id)
        rows = (await self.session.execute(stmt)).fetchall()
        return {TagId(row.tag_id): row.question_count for row in rows}
