"""Response items and field types shared by the forum use cases."""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel

from fakeso.domain.model import (
    AggregatedAnswer,
    AggregatedComment,
    AggregatedQuestion,
    Answer,
    Tag,
    TagCount,
)


def _assume_utc(value: datetime) -> datetime:
    """Naive timestamps from clients are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_assume_utc)]
OptionalTimestamp = Optional[Timestamp]


class TagItem(BaseModel):
    """Tag item in responses."""

    tag_id: str
    name: str

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagItem":
        return cls(tag_id=str(tag.id), name=tag.name.root)


class TagCountItem(BaseModel):
    """Tag with its question count."""

    tag_id: str
    name: str
    question_count: int

    @classmethod
    def from_domain(cls, tag_count: TagCount) -> "TagCountItem":
        return cls(
            tag_id=str(tag_count.tag.id),
            name=tag_count.tag.name.root,
            question_count=tag_count.question_count,
        )


class CommentItem(BaseModel):
    """Comment item in responses.

    ``commenter_name`` is only filled in when the comment was aggregated
    with its question.
    """

    comment_id: str
    text: str
    commented_by: str
    commenter_name: str | None = None
    commented_at: datetime


class AnswerItem(BaseModel):
    """Answer item in responses."""

    answer_id: str
    text: str
    answered_by: str
    answered_at: datetime
    votes: int
    voted_by: list[str]
    comments: list[CommentItem]

    @classmethod
    def from_domain(cls, answer: Answer | AggregatedAnswer) -> "AnswerItem":
        return cls(
            answer_id=str(answer.id),
            text=answer.text,
            answered_by=answer.answered_by,
            answered_at=answer.answered_at,
            votes=answer.votes,
            voted_by=sorted(str(uid) for uid in answer.voted_by),
            comments=[
                CommentItem(
                    comment_id=str(c.id),
                    text=c.text,
                    commented_by=str(c.commented_by),
                    commenter_name=(
                        c.commenter_name
                        if isinstance(c, AggregatedComment)
                        else None
                    ),
                    commented_at=c.commented_at,
                )
                for c in answer.comments
            ],
        )


class QuestionItem(BaseModel):
    """Aggregated question in responses."""

    question_id: str
    title: str
    text: str
    tags: list[TagItem]
    answers: list[AnswerItem]
    asked_by: str
    asked_at: datetime
    views: int
    most_recent_activity: datetime

    @classmethod
    def from_domain(cls, question: AggregatedQuestion) -> "QuestionItem":
        return cls(
            question_id=str(question.id),
            title=question.title,
            text=question.text,
            tags=[TagItem.from_domain(tag) for tag in question.tags],
            answers=[AnswerItem.from_domain(a) for a in question.answers],
            asked_by=question.asked_by,
            asked_at=question.asked_at,
            views=question.views,
            most_recent_activity=question.most_recent_activity,
        )
