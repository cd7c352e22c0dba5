"""Question use cases."""

from .add_question import AddQuestionRequest, AddQuestionResponse, AddQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)

__all__ = [
    "AddQuestionRequest",
    "AddQuestionResponse",
    "AddQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
]
