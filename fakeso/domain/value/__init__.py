"""Domain value objects for the forum."""

from fakeso.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    UserId,
)
from fakeso.domain.value.types import QuestionSortOrder, TagName, VoteState

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "TagId",
    # Types
    "TagName",
    "QuestionSortOrder",
    "VoteState",
]
