"""Toggle vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from fakeso.domain.service import UserService, VoteService
from fakeso.domain.value import AnswerId, VoteState

from fakeso.application.usecase.common import AnswerItem


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    answer_id: UUID
    voter: str = Field(min_length=1)  # User ID or e-mail


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    answer: AnswerItem
    state: VoteState  # Voter's state after the toggle


class ToggleVoteUseCase:
    """Use case for voting on, or withdrawing a vote from, an answer."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service (identity resolution)
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            InvalidReferenceError: If the voter does not resolve to a user
            NotFoundError: If the answer does not exist
        """
        with logfire.span("toggle_vote.execute", answer_id=str(request.answer_id)):
            voter = await self.user_service.resolve_identity(request.voter)
            answer = await self.vote_service.toggle_vote(
                AnswerId(request.answer_id), voter.id
            )
            return ToggleVoteResponse(
                answer=AnswerItem.from_domain(answer),
                state=answer.vote_state(voter.id),
            )
