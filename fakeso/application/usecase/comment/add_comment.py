"""Add comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from fakeso.domain.model.common import utc_now
from fakeso.domain.service import CommentService, UserService
from fakeso.domain.value import AnswerId

from fakeso.application.usecase.common import AnswerItem, OptionalTimestamp


class AddCommentRequest(BaseModel):
    """Add comment request.

    Length is checked by the comment service against configured limits.
    """

    answer_id: UUID
    text: str
    commenter: str = Field(min_length=1)  # User ID or e-mail
    commented_at: OptionalTimestamp = None  # Defaults to now


class AddCommentResponse(BaseModel):
    """Add comment response."""

    answer: AnswerItem


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (identity resolution)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            InvalidInputError: If the text is blank or too long
            InvalidReferenceError: If the commenter does not resolve to a user
            NotFoundError: If the answer does not exist
        """
        with logfire.span("add_comment.execute", answer_id=str(request.answer_id)):
            text = self.comment_service.validate_text(request.text)
            commenter = await self.user_service.resolve_identity(request.commenter)
            answer = await self.comment_service.add_comment(
                answer_id=AnswerId(request.answer_id),
                text=text,
                commenter_id=commenter.id,
                commented_at=request.commented_at or utc_now(),
            )
            return AddCommentResponse(answer=AnswerItem.from_domain(answer))
