"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Relationship columns
(tag ids, answer ids, voters, comments) live in their own tables and are
passed in by the repositories.
"""

from typing import Any, Dict, Iterable, Sequence
from uuid import UUID

from fakeso.domain.model import Answer, Comment, Question, Tag, User
from fakeso.domain.value import AnswerId, CommentId, QuestionId, TagId, TagName, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Adds the case-folded ``name_key`` the uniqueness index is built on.
    """
    return {
        "id": tag.id,
        "name": tag.name.root,
        "name_key": tag.key,
        "created_at": tag.created_at,
    }


def row_to_question(
    row: Dict[str, Any],
    tag_ids: Sequence[UUID],
    answer_ids: Sequence[UUID],
) -> Question:
    """Convert database row plus its ordered relationships to a Question.

    Args:
        row: Database row as dict
        tag_ids: Tag IDs in the order they were given
        answer_ids: Answer IDs in the order they were appended

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        tag_ids=[TagId(_uuid(t)) for t in tag_ids],
        answer_ids=[AnswerId(_uuid(a)) for a in answer_ids],
        asked_by=row["asked_by"],
        asked_at=row["asked_at"],
        views=row["views"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to a ``questions`` row (no relationships)."""
    return question.model_dump(exclude={"tag_ids", "answer_ids"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        text=row["text"],
        commented_by=UserId(_uuid(row["commented_by"])),
        commented_at=row["commented_at"],
    )


def comment_to_dict(answer_id: AnswerId, comment: Comment) -> Dict[str, Any]:
    return {"answer_id": answer_id, **comment.model_dump()}


def row_to_answer(
    row: Dict[str, Any],
    voted_by: Iterable[UUID],
    comments: Sequence[Comment],
) -> Answer:
    """Convert database row plus its voters and comments to an Answer.

    Args:
        row: Database row as dict
        voted_by: IDs of users with a vote row on this answer
        comments: Comments in insertion order

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        text=row["text"],
        answered_by=row["answered_by"],
        answered_at=row["answered_at"],
        votes=row["votes"],
        voted_by=frozenset(UserId(_uuid(u)) for u in voted_by),
        comments=list(comments),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to an ``answers`` row (no ledgers)."""
    return answer.model_dump(exclude={"voted_by", "comments"})
