"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from fakeso.domain.repository.answer import AnswerRepository
from fakeso.domain.repository.question import QuestionRepository
from fakeso.domain.repository.tag import TagRepository
from fakeso.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "TagRepository",
]
