"""Unit tests for ListTagsUseCase."""

import pytest

from fakeso.application.usecase.question import AddQuestionRequest, AddQuestionUseCase
from fakeso.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_counts_per_tag(self, unit_env):
        # Arrange
        add = await unit_env.get(AddQuestionUseCase)
        use_case = await unit_env.get(ListTagsUseCase)
        for tags in (["python", "async"], ["Python"], ["django"]):
            await add.execute(
                AddQuestionRequest(
                    title="Title", text="Text", tag_names=tags, asked_by="alice"
                )
            )

        # Act
        response = await use_case.execute(ListTagsRequest())

        # Assert
        assert [(t.name, t.question_count) for t in response.tags] == [
            ("async", 1),
            ("django", 1),
            ("python", 2),
        ]
