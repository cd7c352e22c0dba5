"""Answer use cases."""

from .add_answer import AddAnswerRequest, AddAnswerResponse, AddAnswerUseCase

__all__ = [
    "AddAnswerRequest",
    "AddAnswerResponse",
    "AddAnswerUseCase",
]
