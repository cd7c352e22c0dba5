"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError

from fakeso.domain.error import InvalidInputError, NotFoundError
from fakeso.domain.model import Answer
from fakeso.domain.repository import AnswerRepository, QuestionRepository
from fakeso.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answering questions."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def add_answer_to_question(
        self,
        question_id: QuestionId,
        text: str,
        answered_by: str,
        answered_at: datetime,
    ) -> Answer:
        """Create an answer and attach it to a question.

        The question is checked first so no orphan answer is stored for a
        missing question. The answer reference is appended atomically.

        Args:
            question_id: Question being answered
            text: Answer text
            answered_by: Author's display name
            answered_at: Answer timestamp

        Returns:
            Created answer with no votes and no comments

        Raises:
            NotFoundError: If the question does not exist
            InvalidInputError: If text or author is empty, or the timestamp
                is naive
        """
        with logfire.span(
            "answer_service.add_answer_to_question", question_id=str(question_id)
        ):
            self.require_aware(answered_at, "answered_at")
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn(
                    "Answer to non-existent question", question_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))

            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    text=text.strip(),
                    answered_by=answered_by.strip(),
                    answered_at=answered_at,
                )
            except ValidationError as e:
                raise InvalidInputError(f"Invalid answer: {e}") from e

            saved = await self.answer_repository.save(answer)
            updated = await self.question_repository.add_answer(question_id, saved.id)
            if updated is None:
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer added",
                question_id=str(question_id),
                answer_id=str(saved.id),
                answer_count=len(updated.answer_ids),
            )
            return saved
