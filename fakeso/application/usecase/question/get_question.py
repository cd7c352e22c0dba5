"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from fakeso.domain.service import QuestionService
from fakeso.domain.value import QuestionId

from fakeso.application.usecase.common import QuestionItem


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question: QuestionItem


class GetQuestionUseCase:
    """Use case for reading a single question.

    Every successful read counts as one view.
    """

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.increment_view_and_fetch(
            QuestionId(request.question_id)
        )
        return GetQuestionResponse(question=QuestionItem.from_domain(question))
