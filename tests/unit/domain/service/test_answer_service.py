"""Unit tests for AnswerService."""

from datetime import datetime
from uuid import uuid4

import pytest

from fakeso.domain.error import InvalidInputError, NotFoundError
from fakeso.domain.repository import AnswerRepository, QuestionRepository
from fakeso.domain.service import AnswerService, QuestionService
from fakeso.domain.value import QuestionId, QuestionSortOrder
from tests.conftest import at
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestAddAnswerToQuestion:
    """Tests for add_answer_to_question."""

    @pytest.mark.asyncio
    async def test_answer_is_created_and_referenced(self, unit_env):
        """The new answer has no votes or comments and is linked."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_service.add_question(
            "Why is my loop slow?", "It takes ages.", ["python"], "carol", at(0)
        )

        # Act
        answer = await answer_service.add_answer_to_question(
            question.id, "Use a comprehension.", "dave", at(5)
        )

        # Assert
        assert answer.votes == 0
        assert answer.voted_by == frozenset()
        assert answer.comments == []
        stored = await question_repo.find_by_id(question.id)
        assert stored is not None
        assert stored.answer_ids == [answer.id]

    @pytest.mark.asyncio
    async def test_answers_keep_insertion_order(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_service.add_question(
            "Title", "Text", ["python"], "carol", at(0)
        )

        first = await answer_service.add_answer_to_question(
            question.id, "One", "dave", at(1)
        )
        second = await answer_service.add_answer_to_question(
            question.id, "Two", "erin", at(2)
        )

        stored = await question_repo.find_by_id(question.id)
        assert stored is not None
        assert stored.answer_ids == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_missing_question_creates_no_answer(self, unit_env):
        """NotFoundError is raised before any answer is stored."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        saved = []
        original_save = answer_repo.save

        async def recording_save(answer):
            saved.append(answer)
            return await original_save(answer)

        answer_repo.save = recording_save  # type: ignore[method-assign]

        # Act & Assert
        with pytest.raises(NotFoundError):
            await answer_service.add_answer_to_question(
                QuestionId(uuid4()), "Orphan?", "dave", at(1)
            )
        assert saved == []

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.add_question(
            "Title", "Text", ["python"], "carol", at(0)
        )

        with pytest.raises(InvalidInputError):
            await answer_service.add_answer_to_question(
                question.id, "   ", "dave", at(1)
            )

    @pytest.mark.asyncio
    async def test_naive_timestamp_rejected(self, unit_env):
        """A naive answer date is refused and listings keep working."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_service.add_question(
            "Title", "Text", ["python"], "carol", at(0)
        )

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await answer_service.add_answer_to_question(
                question.id, "Answer", "dave", datetime(2024, 3, 1)
            )

        stored = await question_repo.find_by_id(question.id)
        assert stored is not None
        assert stored.answer_ids == []
        listed = await question_service.list_questions(QuestionSortOrder.ACTIVE)
        assert [q.id for q in listed] == [question.id]


class TestAddAnswerReference:
    """Appending an answer reference is idempotent."""

    @pytest.mark.asyncio
    async def test_same_answer_added_twice(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_service.add_question(
            "Title", "Text", ["python"], "carol", at(0)
        )
        answer = await answer_service.add_answer_to_question(
            question.id, "Once", "dave", at(1)
        )

        # Act
        updated = await question_repo.add_answer(question.id, answer.id)

        # Assert
        assert updated is not None
        assert updated.answer_ids == [answer.id]
