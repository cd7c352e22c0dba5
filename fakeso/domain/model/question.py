"""Question aggregate root and its display-ready aggregated form."""

from datetime import datetime
from typing import Iterable

from pydantic import AwareDatetime, Field

from fakeso.domain.model.answer import Answer
from fakeso.domain.model.common import DomainModel
from fakeso.domain.model.tag import Tag
from fakeso.domain.value import AnswerId, CommentId, QuestionId, TagId, UserId


class Question(DomainModel):
    """Question aggregate root as stored.

    Tags and answers are referenced by id. ``answer_ids`` only grows, and
    never holds the same id twice; ``views`` only grows.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=100)
    text: str = Field(min_length=1)
    tag_ids: list[TagId] = Field(min_length=1)
    answer_ids: list[AnswerId] = Field(default_factory=list)
    asked_by: str = Field(min_length=1, max_length=255)
    asked_at: AwareDatetime
    views: int = Field(default=0, ge=0)

    @property
    def has_answers(self) -> bool:
        return len(self.answer_ids) > 0


def most_recent_activity(asked_at: datetime, answers: Iterable[Answer]) -> datetime:
    """Latest of the ask date and every answer date."""
    return max([asked_at, *(answer.answered_at for answer in answers)])


class AggregatedComment(DomainModel):
    """Comment with the commenter resolved to a display name."""

    id: CommentId
    text: str
    commented_by: UserId
    commenter_name: str
    commented_at: AwareDatetime


class AggregatedAnswer(DomainModel):
    """Answer ready for display."""

    id: AnswerId
    text: str
    answered_by: str
    answered_at: AwareDatetime
    votes: int
    voted_by: frozenset[UserId]
    comments: list[AggregatedComment]


class AggregatedQuestion(DomainModel):
    """Question with tags and answers resolved from ids to full objects."""

    id: QuestionId
    title: str
    text: str
    tags: list[Tag]
    answers: list[AggregatedAnswer]
    asked_by: str
    asked_at: AwareDatetime
    views: int
    most_recent_activity: AwareDatetime

    @property
    def tag_names(self) -> list[str]:
        return [tag.name.root for tag in self.tags]
