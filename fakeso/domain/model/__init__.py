"""Domain model entities for the forum."""

from fakeso.domain.model.answer import Answer, Comment
from fakeso.domain.model.question import (
    AggregatedAnswer,
    AggregatedComment,
    AggregatedQuestion,
    Question,
)
from fakeso.domain.model.tag import Tag, TagCount
from fakeso.domain.model.user import User

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Tag",
    "TagCount",
    "AggregatedQuestion",
    "AggregatedAnswer",
    "AggregatedComment",
]
