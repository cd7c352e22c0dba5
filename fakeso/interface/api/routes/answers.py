"""Answer routes: votes and comments."""

from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from fakeso.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
)
from fakeso.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class ToggleVoteAPIRequest(BaseModel):
    """API request for toggling a vote.

    ``voter`` is a user ID or an e-mail address.
    """

    voter: str = Field(min_length=1)


@router.patch("/{answer_id}/vote", response_model=ToggleVoteResponse)
async def toggle_vote(
    answer_id: UUID,
    request: ToggleVoteAPIRequest,
    use_case: FromDishka[ToggleVoteUseCase],
) -> ToggleVoteResponse:
    """Vote on an answer, or withdraw the vote if already cast."""
    with logfire.span("api.toggle_vote", answer_id=str(answer_id)):
        return await use_case.execute(
            ToggleVoteRequest(answer_id=answer_id, voter=request.voter)
        )


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    text: str
    commenter: str = Field(min_length=1)  # User ID or e-mail
    commented_at: datetime | None = None


@router.post(
    "/{answer_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    answer_id: UUID,
    request: AddCommentAPIRequest,
    use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Comment on an answer."""
    with logfire.span("api.add_comment", answer_id=str(answer_id)):
        return await use_case.execute(
            AddCommentRequest(
                answer_id=answer_id,
                text=request.text,
                commenter=request.commenter,
                commented_at=request.commented_at,
            )
        )
