"""Unit tests for ListQuestionsUseCase."""

from datetime import datetime, timezone

import pytest

from fakeso.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from fakeso.domain.error import InvalidOrderError
from fakeso.domain.value import QuestionSortOrder
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_newest(self, unit_env):
        # Arrange
        add = await unit_env.get(AddQuestionUseCase)
        use_case = await unit_env.get(ListQuestionsUseCase)
        for day, title in ((1, "Older"), (2, "Newer")):
            await add.execute(
                AddQuestionRequest(
                    title=title,
                    text="Text",
                    tag_names=["misc"],
                    asked_by="alice",
                    asked_at=datetime(2023, 1, day, tzinfo=timezone.utc),
                )
            )

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert
        assert response.order is QuestionSortOrder.NEWEST
        assert [q.title for q in response.questions] == ["Newer", "Older"]

    @pytest.mark.asyncio
    async def test_search_by_tag(self, unit_env):
        add = await unit_env.get(AddQuestionUseCase)
        use_case = await unit_env.get(ListQuestionsUseCase)
        await add.execute(
            AddQuestionRequest(
                title="Flexbox", text="Centering", tag_names=["CSS"], asked_by="a"
            )
        )
        await add.execute(
            AddQuestionRequest(
                title="Joins", text="Outer joins", tag_names=["sql"], asked_by="b"
            )
        )

        response = await use_case.execute(
            ListQuestionsRequest(order="unanswered", search="[css]")
        )

        assert [q.title for q in response.questions] == ["Flexbox"]

    @pytest.mark.asyncio
    async def test_unknown_order(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(InvalidOrderError):
            await use_case.execute(ListQuestionsRequest(order="popular"))
