"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from fakeso.config import ContentSettings
from fakeso.domain.error import InvalidInputError, NotFoundError
from fakeso.domain.model import Answer, Comment
from fakeso.domain.repository import AnswerRepository
from fakeso.domain.value import AnswerId, CommentId, UserId

from .base import Service
from .user_service import UserService


class CommentService(Service):
    """Domain service for the append-only comment list of an answer."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            answer_repository: Answer repository
            user_service: User domain service
            content_settings: Content limits
        """
        self.answer_repository = answer_repository
        self.user_service = user_service
        self.content_settings = content_settings

    def validate_text(self, text: str) -> str:
        """Strip comment text and enforce the length limit.

        Raises:
            InvalidInputError: If the text is blank or too long
        """
        text = text.strip()
        if not text:
            raise InvalidInputError("Comment text is required")
        limit = self.content_settings.max_comment_length
        if len(text) > limit:
            raise InvalidInputError(f"Comment must be at most {limit} characters")
        return text

    async def add_comment(
        self,
        answer_id: AnswerId,
        text: str,
        commenter_id: UserId,
        commented_at: datetime,
    ) -> Answer:
        """Append a comment to an answer.

        Args:
            answer_id: Answer ID
            text: Comment text
            commenter_id: Commenter's user ID
            commented_at: Comment timestamp

        Returns:
            Updated answer with the comment last in its list

        Raises:
            InvalidInputError: If the text is invalid or the timestamp is naive
            NotFoundError: If the answer does not exist
            InvalidReferenceError: If the commenter does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            answer_id=str(answer_id),
            commenter_id=str(commenter_id),
        ):
            text = self.validate_text(text)
            self.require_aware(commented_at, "commented_at")

            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None:
                logfire.warn("Comment on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            await self.user_service.require_user(commenter_id)

            comment = Comment(
                id=CommentId(uuid4()),
                text=text,
                commented_by=commenter_id,
                commented_at=commented_at,
            )
            updated = await self.answer_repository.append_comment(answer_id, comment)
            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Comment added",
                answer_id=str(answer_id),
                comment_id=str(comment.id),
                comment_count=len(updated.comments),
            )
            return updated
