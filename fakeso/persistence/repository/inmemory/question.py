"""In-memory question repository for testing.

Every mutation reads and writes the dict without awaiting in between, so it
cannot interleave with another coroutine on the same event loop.
"""

from collections import Counter
from copy import deepcopy
from typing import List, Optional

from fakeso.domain.model.question import Question
from fakeso.domain.repository.question import QuestionRepository
from fakeso.domain.value import AnswerId, QuestionId, TagId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        question = self._questions.get(question_id)
        return deepcopy(question) if question else None

    async def find_all(self, unanswered_only: bool = False) -> List[Question]:
        """Find questions newest first."""
        questions = [
            q
            for q in self._questions.values()
            if not unanswered_only or not q.has_answers
        ]
        questions.sort(key=lambda q: q.asked_at, reverse=True)
        return [deepcopy(q) for q in questions]

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = deepcopy(question)
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = updated
        return deepcopy(updated)

    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer reference unless already present."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        if answer_id in question.answer_ids:
            return deepcopy(question)
        updated = question.model_copy(
            update={"answer_ids": [*question.answer_ids, answer_id]}
        )
        self._questions[question_id] = updated
        return deepcopy(updated)

    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per tag."""
        return dict(
            Counter(tid for q in self._questions.values() for tid in set(q.tag_ids))
        )
