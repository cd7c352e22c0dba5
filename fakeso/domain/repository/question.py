"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from fakeso.domain.model.question import Question
from fakeso.domain.value import AnswerId, QuestionId, TagId


class QuestionRepository(ABC):
    """Repository for the Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, unanswered_only: bool = False) -> List[Question]:
        """Find questions, newest first (asked_at DESC).

        Args:
            unanswered_only: Only return questions without any answer

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views by 1.

        Uses a storage-level increment so that concurrent reads each
        contribute exactly one view.

        Args:
            question_id: The question ID

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Atomically append an answer reference.

        Appending an id the question already references is a no-op.

        Args:
            question_id: The question ID
            answer_id: The answer ID to append

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per referenced tag.

        Tags no question references are absent from the result.

        Returns:
            Mapping of tag ID to number of questions
        """
        pass
