"""Domain layer DI providers."""

from dishka import Scope, provide

from fakeso.config import ContentSettings
from fakeso.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from fakeso.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from fakeso.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(
        self,
        tag_repository: TagRepository,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository,
            question_repository=question_repository,
            content_settings=content_settings,
        )

    @provide
    def get_vote_service(
        self, answer_repository: AnswerRepository, user_service: UserService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            answer_repository=answer_repository, user_service=user_service
        )

    @provide
    def get_comment_service(
        self,
        answer_repository: AnswerRepository,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            answer_repository=answer_repository,
            user_service=user_service,
            content_settings=content_settings,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tag_service: TagService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            tag_service=tag_service,
            user_service=user_service,
            content_settings=content_settings,
        )
