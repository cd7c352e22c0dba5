"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .question_service import QuestionService
from .search import SearchQuery, search_questions
from .tag_service import TagService
from .user_service import UNKNOWN_USER_NAME, UserService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "CommentService",
    "QuestionService",
    "SearchQuery",
    "Service",
    "TagService",
    "UNKNOWN_USER_NAME",
    "UserService",
    "VoteService",
    "search_questions",
]
