"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from fakeso.domain.model.answer import Answer, Comment
from fakeso.domain.value import AnswerId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entities and their vote/comment ledgers.

    Ledger mutations are atomic per call so that concurrent requests from
    different users never lose each other's updates.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer (with voters and comments) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> List[Answer]:
        """Find multiple answers in a single query.

        Args:
            answer_ids: Answer IDs to load

        Returns:
            Found answers (may be fewer than requested), in no particular order
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def add_voter(self, answer_id: AnswerId, user_id: UserId) -> Optional[Answer]:
        """Record a vote and increment the counter, atomically.

        Adding a voter already present changes nothing.

        Args:
            answer_id: The answer ID
            user_id: The voter

        Returns:
            The updated answer, or None if it does not exist
        """
        pass

    @abstractmethod
    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId
    ) -> Optional[Answer]:
        """Remove a vote and decrement the counter (minimum 0), atomically.

        Removing a voter that is absent changes nothing.

        Args:
            answer_id: The answer ID
            user_id: The voter

        Returns:
            The updated answer, or None if it does not exist
        """
        pass

    @abstractmethod
    async def append_comment(
        self, answer_id: AnswerId, comment: Comment
    ) -> Optional[Answer]:
        """Append a comment to the end of an answer's comment list.

        Args:
            answer_id: The answer ID
            comment: The comment to append

        Returns:
            The updated answer, or None if it does not exist
        """
        pass
