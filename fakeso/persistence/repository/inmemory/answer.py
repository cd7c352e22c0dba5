"""In-memory answer repository for testing.

Every mutation reads and writes the dict without awaiting in between, so it
cannot interleave with another coroutine on the same event loop.
"""

from copy import deepcopy
from typing import List, Optional, Sequence

from fakeso.domain.model.answer import Answer, Comment
from fakeso.domain.repository.answer import AnswerRepository
from fakeso.domain.value import AnswerId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        answer = self._answers.get(answer_id)
        return deepcopy(answer) if answer else None

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> List[Answer]:
        """Find multiple answers."""
        return [
            deepcopy(self._answers[aid]) for aid in answer_ids if aid in self._answers
        ]

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = deepcopy(answer)
        return answer

    async def add_voter(self, answer_id: AnswerId, user_id: UserId) -> Optional[Answer]:
        """Add a voter and increment the counter if not already present."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        if user_id not in answer.voted_by:
            answer = answer.model_copy(
                update={
                    "votes": answer.votes + 1,
                    "voted_by": answer.voted_by | {user_id},
                }
            )
            self._answers[answer_id] = answer
        return deepcopy(answer)

    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId
    ) -> Optional[Answer]:
        """Remove a voter and decrement the counter (minimum 0) if present."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        if user_id in answer.voted_by:
            answer = answer.model_copy(
                update={
                    "votes": max(0, answer.votes - 1),
                    "voted_by": answer.voted_by - {user_id},
                }
            )
            self._answers[answer_id] = answer
        return deepcopy(answer)

    async def append_comment(
        self, answer_id: AnswerId, comment: Comment
    ) -> Optional[Answer]:
        """Append a comment."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        answer = answer.model_copy(update={"comments": [*answer.comments, comment]})
        self._answers[answer_id] = answer
        return deepcopy(answer)

    def remove(self, answer_id: AnswerId) -> None:
        """Drop an answer without touching questions (simulates corruption)."""
        self._answers.pop(answer_id, None)
