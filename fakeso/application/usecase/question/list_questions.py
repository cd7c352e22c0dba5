"""List questions use case."""

import logfire
from pydantic import BaseModel

from fakeso.domain.service import QuestionService
from fakeso.domain.value import QuestionSortOrder

from fakeso.application.usecase.common import QuestionItem


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    order: str | None = None  # newest (default), active, unanswered
    search: str | None = None  # e.g. "[react] hooks"


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    order: QuestionSortOrder


class ListQuestionsUseCase:
    """Use case for listing questions in an order, optionally searched."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request

        Returns:
            Matching questions in the requested order

        Raises:
            InvalidOrderError: If the order key is unknown
        """
        with logfire.span(
            "list_questions.execute", order=request.order, search=request.search
        ):
            order = QuestionSortOrder.parse(request.order)
            questions = await self.question_service.list_questions(
                order, request.search
            )
            return ListQuestionsResponse(
                questions=[QuestionItem.from_domain(q) for q in questions],
                order=order,
            )
