"""Strongly typed identifiers for forum entities.

NewType keeps question, answer and user ids from being mixed up while
staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
CommentId = NewType("CommentId", UUID)
TagId = NewType("TagId", UUID)
