"""Add answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from fakeso.domain.model.common import utc_now
from fakeso.domain.service import AnswerService
from fakeso.domain.value import QuestionId

from fakeso.application.usecase.common import AnswerItem, OptionalTimestamp


class AddAnswerRequest(BaseModel):
    """Add answer request."""

    question_id: UUID
    text: str = Field(min_length=1)
    answered_by: str = Field(min_length=1, max_length=255)
    answered_at: OptionalTimestamp = None  # Defaults to now


class AddAnswerResponse(BaseModel):
    """Add answer response."""

    question_id: str
    answer: AnswerItem


class AddAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize add answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: AddAnswerRequest) -> AddAnswerResponse:
        """Execute add answer flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("add_answer.execute", question_id=str(request.question_id)):
            answer = await self.answer_service.add_answer_to_question(
                question_id=QuestionId(request.question_id),
                text=request.text,
                answered_by=request.answered_by,
                answered_at=request.answered_at or utc_now(),
            )
            return AddAnswerResponse(
                question_id=str(request.question_id),
                answer=AnswerItem.from_domain(answer),
            )
