"""Question domain service.

Owns the three listing strategies and the aggregation of a stored question
(tag and answer references) into its display form.
"""

from datetime import datetime
from typing import Awaitable, Callable, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError

from fakeso.config import ContentSettings
from fakeso.domain.error import DataIntegrityError, InvalidInputError, NotFoundError
from fakeso.domain.model import (
    AggregatedAnswer,
    AggregatedComment,
    AggregatedQuestion,
    Answer,
    Question,
    Tag,
)
from fakeso.domain.model.question import most_recent_activity
from fakeso.domain.repository import AnswerRepository, QuestionRepository
from fakeso.domain.value import AnswerId, QuestionId, QuestionSortOrder, TagId, UserId

from .base import Service
from .search import search_questions
from .tag_service import TagService
from .user_service import UNKNOWN_USER_NAME, UserService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tag_service: TagService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            tag_service: Tag domain service
            user_service: User domain service
            content_settings: Content limits
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.tag_service = tag_service
        self.user_service = user_service
        self.content_settings = content_settings

        self._strategies: dict[
            QuestionSortOrder, Callable[[], Awaitable[list[AggregatedQuestion]]]
        ] = {
            QuestionSortOrder.NEWEST: self._newest,
            QuestionSortOrder.ACTIVE: self._active,
            QuestionSortOrder.UNANSWERED: self._unanswered,
        }

    async def add_question(
        self,
        title: str,
        text: str,
        tag_names: Sequence[str],
        asked_by: str,
        asked_at: datetime,
    ) -> AggregatedQuestion:
        """Create a question, creating any tags it names.

        Args:
            title: Question title
            text: Question body
            tag_names: Tag names (duplicates collapse case-insensitively)
            asked_by: Author's display name
            asked_at: Ask timestamp

        Returns:
            The stored question, aggregated, with no answers and zero views

        Raises:
            InvalidInputError: If any field is missing or out of bounds, or
                ``asked_at`` is naive
        """
        with logfire.span("question_service.add_question", title=title):
            self.require_aware(asked_at, "asked_at")
            title = title.strip()
            if len(title) > self.content_settings.max_title_length:
                raise InvalidInputError(
                    f"Title must be at most "
                    f"{self.content_settings.max_title_length} characters"
                )
            names = self.tag_service.parse_names(tag_names)
            if not names:
                raise InvalidInputError("At least one tag is required")
            if len(names) > self.content_settings.max_tags_per_question:
                raise InvalidInputError(
                    f"At most {self.content_settings.max_tags_per_question} "
                    f"tags are allowed"
                )

            tags = await self.tag_service.resolve_or_create([n.root for n in names])

            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    text=text.strip(),
                    tag_ids=[tag.id for tag in tags],
                    asked_by=asked_by.strip(),
                    asked_at=asked_at,
                )
            except ValidationError as e:
                raise InvalidInputError(f"Invalid question: {e}") from e

            saved = await self.question_repository.save(question)
            logfire.info(
                "Question saved", question_id=str(saved.id), tags=len(saved.tag_ids)
            )
            return self._assemble(saved, {tag.id: tag for tag in tags}, {}, {})

    async def increment_view_and_fetch(
        self, question_id: QuestionId
    ) -> AggregatedQuestion:
        """Count one view of a question and return it aggregated.

        Args:
            question_id: Question ID

        Returns:
            Aggregated question including this view

        Raises:
            NotFoundError: If the question does not exist
            DataIntegrityError: If it references missing tags or answers
        """
        with logfire.span(
            "question_service.increment_view_and_fetch", question_id=str(question_id)
        ):
            question = await self.question_repository.increment_views(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Question viewed", question_id=str(question_id), views=question.views
            )
            return await self.aggregate(question)

    async def list_questions(
        self, order: QuestionSortOrder, search: str | None = None
    ) -> list[AggregatedQuestion]:
        """List questions in the given order, optionally filtered.

        Args:
            order: Listing strategy
            search: Search string with bracketed tags and free words

        Returns:
            Aggregated questions (empty if nothing matches)
        """
        with logfire.span(
            "question_service.list_questions", order=order.value, search=search
        ):
            questions = await self._strategies[order]()
            if search:
                questions = search_questions(questions, search)
            logfire.info("Questions listed", order=order.value, count=len(questions))
            return questions

    async def _newest(self) -> list[AggregatedQuestion]:
        return await self.aggregate_many(await self.question_repository.find_all())

    async def _active(self) -> list[AggregatedQuestion]:
        questions = await self.aggregate_many(await self.question_repository.find_all())
        # Stable sort keeps newest-first among equal activity
        return sorted(questions, key=lambda q: q.most_recent_activity, reverse=True)

    async def _unanswered(self) -> list[AggregatedQuestion]:
        return await self.aggregate_many(
            await self.question_repository.find_all(unanswered_only=True)
        )

    async def aggregate(self, question: Question) -> AggregatedQuestion:
        """Resolve a question's tags and answers.

        Raises:
            DataIntegrityError: If a tag or answer reference is dangling
        """
        [aggregated] = await self.aggregate_many([question])
        return aggregated

    async def aggregate_many(
        self, questions: Sequence[Question]
    ) -> list[AggregatedQuestion]:
        """Resolve tags and answers of several questions.

        Tags, answers and commenter names are loaded with one batch query
        each, whatever the number of questions.

        Raises:
            DataIntegrityError: If a tag or answer reference is dangling
        """
        if not questions:
            return []

        tag_ids = [tid for q in questions for tid in q.tag_ids]
        answer_ids = [aid for q in questions for aid in q.answer_ids]

        tags = await self.tag_service.get_tags_by_ids(tag_ids)
        answers: dict[AnswerId, Answer] = {}
        if answer_ids:
            loaded = await self.answer_repository.find_by_ids(
                list(dict.fromkeys(answer_ids))
            )
            answers = {answer.id: answer for answer in loaded}

        commenter_ids = [
            comment.commented_by
            for answer in answers.values()
            for comment in answer.comments
        ]
        names = await self.user_service.get_display_names(commenter_ids)

        return [self._assemble(q, tags, answers, names) for q in questions]

    def _assemble(
        self,
        question: Question,
        tags: dict[TagId, Tag],
        answers: dict[AnswerId, Answer],
        names: dict[UserId, str],
    ) -> AggregatedQuestion:
        missing_tags = [tid for tid in question.tag_ids if tid not in tags]
        missing_answers = [aid for aid in question.answer_ids if aid not in answers]
        if missing_tags or missing_answers:
            logfire.error(
                "Dangling references on question",
                question_id=str(question.id),
                missing_tags=[str(t) for t in missing_tags],
                missing_answers=[str(a) for a in missing_answers],
            )
            raise DataIntegrityError(
                f"Question {question.id} references missing "
                f"tags {[str(t) for t in missing_tags]} "
                f"or answers {[str(a) for a in missing_answers]}"
            )

        own_answers = [answers[aid] for aid in question.answer_ids]
        ordered = sorted(
            own_answers, key=lambda a: (a.votes, a.answered_at), reverse=True
        )

        return AggregatedQuestion(
            id=question.id,
            title=question.title,
            text=question.text,
            tags=[tags[tid] for tid in question.tag_ids],
            answers=[self._assemble_answer(a, names) for a in ordered],
            asked_by=question.asked_by,
            asked_at=question.asked_at,
            views=question.views,
            most_recent_activity=most_recent_activity(question.asked_at, own_answers),
        )

    @staticmethod
    def _assemble_answer(answer: Answer, names: dict[UserId, str]) -> AggregatedAnswer:
        return AggregatedAnswer(
            id=answer.id,
            text=answer.text,
            answered_by=answer.answered_by,
            answered_at=answer.answered_at,
            votes=answer.votes,
            voted_by=answer.voted_by,
            comments=[
                AggregatedComment(
                    id=c.id,
                    text=c.text,
                    commented_by=c.commented_by,
                    commenter_name=names.get(c.commented_by, UNKNOWN_USER_NAME),
                    commented_at=c.commented_at,
                )
                for c in answer.comments
            ],
        )
