"""Unit tests for CommentService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from fakeso.domain.error import InvalidInputError, InvalidReferenceError, NotFoundError
from fakeso.domain.model import Answer
from fakeso.domain.repository import AnswerRepository, UserRepository
from fakeso.domain.service import CommentService
from fakeso.domain.value import AnswerId, UserId
from tests.conftest import at, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed_answer(unit_env) -> Answer:
    answer_repo = await unit_env.get(AnswerRepository)
    return await answer_repo.save(
        Answer(
            id=AnswerId(uuid4()),
            text="Use a set.",
            answered_by="bob",
            answered_at=datetime(2023, 1, 2, tzinfo=timezone.utc),
        )
    )


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_comments_are_appended_in_order(self, unit_env):
        """Each comment lands at the end of the list."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        answer = await _seed_answer(unit_env)

        # Act
        await comment_service.add_comment(answer.id, "First", alice.id, at(1))
        result = await comment_service.add_comment(
            answer.id, "  Second  ", bob.id, at(2)
        )

        # Assert
        assert [c.text for c in result.comments] == ["First", "Second"]
        assert [c.commented_by for c in result.comments] == [alice.id, bob.id]

    @pytest.mark.asyncio
    async def test_comment_at_length_limit(self, unit_env):
        """A comment of exactly the configured maximum is accepted."""
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        answer = await _seed_answer(unit_env)

        result = await comment_service.add_comment(
            answer.id, "x" * 500, alice.id, at(1)
        )

        assert len(result.comments[0].text) == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "x" * 501])
    async def test_invalid_text(self, unit_env, text):
        """Blank or over-long text raises InvalidInputError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        answer = await _seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await comment_service.add_comment(answer.id, text, alice.id, at(1))

    @pytest.mark.asyncio
    async def test_naive_timestamp_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        answer = await _seed_answer(unit_env)

        with pytest.raises(InvalidInputError):
            await comment_service.add_comment(
                answer.id, "Hello", alice.id, datetime(2023, 1, 3)
            )

    @pytest.mark.asyncio
    async def test_unknown_answer(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(
                AnswerId(uuid4()), "Hello", alice.id, at(1)
            )

    @pytest.mark.asyncio
    async def test_unknown_commenter(self, unit_env):
        """A commenter with no account raises InvalidReferenceError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await _seed_answer(unit_env)

        # Act & Assert
        with pytest.raises(InvalidReferenceError):
            await comment_service.add_comment(
                answer.id, "Hello", UserId(uuid4()), at(1)
            )

        stored = await answer_repo.find_by_id(answer.id)
        assert stored is not None
        assert stored.comments == []
