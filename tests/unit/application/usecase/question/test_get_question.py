"""Unit tests for AddQuestionUseCase and GetQuestionUseCase."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from fakeso.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
)
from fakeso.domain.error import NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestAddThenGet:
    """Round trip through the question use cases."""

    @pytest.mark.asyncio
    async def test_round_trip(self, unit_env):
        """A fetched question matches what was added, with one view."""
        # Arrange
        add = await unit_env.get(AddQuestionUseCase)
        get = await unit_env.get(GetQuestionUseCase)
        added = await add.execute(
            AddQuestionRequest(
                title="What is a monad?",
                text="Plain words please.",
                tag_names=["haskell", "fp"],
                asked_by="alice",
                asked_at=datetime(2023, 5, 1, 8, 0),
            )
        )

        # Act
        fetched = await get.execute(
            GetQuestionRequest(question_id=UUID(added.question.question_id))
        )

        # Assert
        assert fetched.question.views == 1
        assert fetched.question.model_dump(exclude={"views"}) == (
            added.question.model_dump(exclude={"views"})
        )
        assert fetched.question.asked_at == datetime(
            2023, 5, 1, 8, 0, tzinfo=timezone.utc
        )
        assert [t.name for t in fetched.question.tags] == ["haskell", "fp"]

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        get = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetQuestionRequest(question_id=uuid4()))


class TestAddQuestionRequest:
    """Request model validation."""

    def test_title_limit(self):
        with pytest.raises(ValidationError):
            AddQuestionRequest(
                title="x" * 101, text="Text", tag_names=["a"], asked_by="alice"
            )

    def test_tags_required(self):
        with pytest.raises(ValidationError):
            AddQuestionRequest(title="T", text="Text", tag_names=[], asked_by="a")

    def test_title_length_counted_after_stripping(self):
        """Surrounding spaces do not count toward the title limit."""
        request = AddQuestionRequest(
            title="  " + "x" * 100 + "  ",
            text="Text",
            tag_names=["a"],
            asked_by=" alice ",
        )

        assert request.title == "x" * 100
        assert request.asked_by == "alice"

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            AddQuestionRequest(title="   ", text="Text", tag_names=["a"], asked_by="a")


class TestAddQuestionUseCase:
    """Add flow through the use case."""

    @pytest.mark.asyncio
    async def test_padded_title_at_limit_accepted(self, unit_env):
        add = await unit_env.get(AddQuestionUseCase)

        response = await add.execute(
            AddQuestionRequest(
                title=" " + "y" * 100 + " ",
                text="Text",
                tag_names=["a"],
                asked_by="alice",
            )
        )

        assert response.question.title == "y" * 100
