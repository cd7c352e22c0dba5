"""Add question use case."""

from typing import Annotated

import logfire
from pydantic import BaseModel, Field, StringConstraints

from fakeso.domain.model.common import utc_now
from fakeso.domain.service import QuestionService

from fakeso.application.usecase.common import OptionalTimestamp, QuestionItem


class AddQuestionRequest(BaseModel):
    """Add question request."""

    title: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
    ]
    text: str = Field(min_length=1)
    tag_names: list[str] = Field(min_length=1)
    asked_by: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
    ]
    asked_at: OptionalTimestamp = None  # Defaults to now


class AddQuestionResponse(BaseModel):
    """Add question response."""

    question: QuestionItem


class AddQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize add question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: AddQuestionRequest) -> AddQuestionResponse:
        """Execute add question flow.

        Tags named for the first time are created.

        Args:
            request: Add question request

        Returns:
            The stored question, aggregated

        Raises:
            InvalidInputError: If fields or tag names are invalid
        """
        with logfire.span("add_question.execute", title=request.title):
            question = await self.question_service.add_question(
                title=request.title,
                text=request.text,
                tag_names=request.tag_names,
                asked_by=request.asked_by,
                asked_at=request.asked_at or utc_now(),
            )
            return AddQuestionResponse(question=QuestionItem.from_domain(question))
