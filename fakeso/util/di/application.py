"""Application layer DI providers."""

from dishka import Scope, provide

from fakeso.application.usecase.answer import AddAnswerUseCase
from fakeso.application.usecase.comment import AddCommentUseCase
from fakeso.application.usecase.question import (
    AddQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from fakeso.application.usecase.tag import ListTagsUseCase
from fakeso.application.usecase.vote import ToggleVoteUseCase
from fakeso.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from fakeso.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_add_question_use_case(
        self, question_service: QuestionService
    ) -> AddQuestionUseCase:
        """Provide add question use case."""
        return AddQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_add_answer_use_case(
        self, answer_service: AnswerService
    ) -> AddAnswerUseCase:
        """Provide add answer use case."""
        return AddAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service, user_service=user_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
