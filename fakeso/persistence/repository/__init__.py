"""PostgreSQL repository implementations."""

from fakeso.persistence.repository.answer import PostgresAnswerRepository
from fakeso.persistence.repository.question import PostgresQuestionRepository
from fakeso.persistence.repository.tag import PostgresTagRepository
from fakeso.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresTagRepository",
]
