"""Question routes."""

from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from fakeso.application.usecase.answer import (
    AddAnswerRequest,
    AddAnswerResponse,
    AddAnswerUseCase,
)
from fakeso.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionResponse,
    AddQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


@router.post(
    "", response_model=AddQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def add_question(
    request: AddQuestionRequest,
    use_case: FromDishka[AddQuestionUseCase],
) -> AddQuestionResponse:
    """Ask a new question.

    Tags named for the first time are created.
    """
    with logfire.span("api.add_question", title=request.title):
        return await use_case.execute(request)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    order: str | None = None,
    search: str | None = None,
) -> ListQuestionsResponse:
    """List questions.

    Example:
        GET /questions?order=active&search=[react] hooks
    """
    with logfire.span("api.list_questions", order=order, search=search):
        return await use_case.execute(ListQuestionsRequest(order=order, search=search))


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a question with its answers; counts as one view."""
    with logfire.span("api.get_question", question_id=str(question_id)):
        return await use_case.execute(GetQuestionRequest(question_id=question_id))


class AddAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    text: str = Field(min_length=1)
    answered_by: str = Field(min_length=1, max_length=255)
    answered_at: datetime | None = None


@router.post(
    "/{question_id}/answers",
    response_model=AddAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_answer(
    question_id: UUID,
    request: AddAnswerAPIRequest,
    use_case: FromDishka[AddAnswerUseCase],
) -> AddAnswerResponse:
    """Answer a question."""
    with logfire.span("api.add_answer", question_id=str(question_id)):
        return await use_case.execute(
            AddAnswerRequest(
                question_id=question_id,
                text=request.text,
                answered_by=request.answered_by,
                answered_at=request.answered_at,
            )
        )
