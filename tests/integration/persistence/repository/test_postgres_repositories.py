"""Integration tests for the PostgreSQL repositories.

These tests run against a migrated database and are skipped unless
DATABASE__URL is set. Rows are committed, so every test uses fresh names.
"""

import asyncio
import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from fakeso.domain.model import Answer, Comment, Question, Tag
from fakeso.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from fakeso.domain.value import AnswerId, CommentId, QuestionId, TagId, TagName
from tests.conftest import make_user
from tests.harness import create_app_env_fixture, create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})
integration_app = create_app_env_fixture(unmock={"persistence"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _tag(name: str) -> Tag:
    return Tag(id=TagId(uuid4()), name=TagName(name), created_at=_now())


class TestTagRepositoryIntegration:
    """Tag uniqueness is enforced by the database."""

    @pytest.mark.asyncio
    async def test_duplicate_name_key_conflicts(self, integration_env):
        """A second tag differing only in case violates the unique index."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        name = f"t{uuid4().hex[:12]}"
        first = await tag_repo.save(_tag(name))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await tag_repo.save(_tag(name.upper()))

        # The savepoint keeps the transaction usable
        found = await tag_repo.find_by_name(TagName(name.upper()))
        assert found is not None
        assert found.id == first.id


class TestAnswerRepositoryIntegration:
    """Vote and comment ledgers in PostgreSQL."""

    @pytest.mark.asyncio
    async def test_vote_toggle_round_trip(self, integration_env):
        # Arrange
        answer_repo = await integration_env.get(AnswerRepository)
        user_repo = await integration_env.get(UserRepository)
        voter = await user_repo.save(make_user(f"u{uuid4().hex[:8]}"))
        answer = await answer_repo.save(
            Answer(
                id=AnswerId(uuid4()),
                text="Answer",
                answered_by="bob",
                answered_at=_now(),
            )
        )

        # Act
        added = await answer_repo.add_voter(answer.id, voter.id)
        again = await answer_repo.add_voter(answer.id, voter.id)
        removed = await answer_repo.remove_voter(answer.id, voter.id)
        removed_again = await answer_repo.remove_voter(answer.id, voter.id)

        # Assert
        assert added is not None and added.votes == 1
        assert again is not None and again.votes == 1
        assert removed is not None and removed.votes == 0
        assert removed_again is not None and removed_again.votes == 0

    @pytest.mark.asyncio
    async def test_comments_in_insertion_order(self, integration_env):
        answer_repo = await integration_env.get(AnswerRepository)
        user_repo = await integration_env.get(UserRepository)
        commenter = await user_repo.save(make_user(f"u{uuid4().hex[:8]}"))
        answer = await answer_repo.save(
            Answer(
                id=AnswerId(uuid4()),
                text="Answer",
                answered_by="bob",
                answered_at=_now(),
            )
        )

        for text in ("first", "second", "third"):
            await answer_repo.append_comment(
                answer.id,
                Comment(
                    id=CommentId(uuid4()),
                    text=text,
                    commented_by=commenter.id,
                    commented_at=_now(),
                ),
            )

        stored = await answer_repo.find_by_id(answer.id)
        assert stored is not None
        assert [c.text for c in stored.comments] == ["first", "second", "third"]


class TestQuestionRepositoryIntegration:
    """Question storage with ordered relationships."""

    @pytest.mark.asyncio
    async def test_question_relationships_and_views(self, integration_env):
        # Arrange
        question_repo = await integration_env.get(QuestionRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        tag_repo = await integration_env.get(TagRepository)
        tags = [
            await tag_repo.save(_tag(f"t{uuid4().hex[:12]}")) for _ in range(2)
        ]
        question = await question_repo.save(
            Question(
                id=QuestionId(uuid4()),
                title="Title",
                text="Text",
                tag_ids=[t.id for t in reversed(tags)],
                asked_by="alice",
                asked_at=_now(),
            )
        )
        answer = await answer_repo.save(
            Answer(
                id=AnswerId(uuid4()),
                text="Answer",
                answered_by="bob",
                answered_at=_now(),
            )
        )

        # Act
        await question_repo.add_answer(question.id, answer.id)
        await question_repo.add_answer(question.id, answer.id)
        await question_repo.increment_views(question.id)
        viewed = await question_repo.increment_views(question.id)
        counts = await question_repo.count_by_tag()

        # Assert
        assert viewed is not None
        assert viewed.views == 2
        assert viewed.tag_ids == [t.id for t in reversed(tags)]
        assert viewed.answer_ids == [answer.id]
        assert all(counts[t.id] == 1 for t in tags)


class TestConcurrentRequestsIntegration:
    """Atomic SQL keeps counters exact across simultaneous requests."""

    @pytest.mark.asyncio
    async def test_concurrent_view_increments_all_counted(self, integration_app):
        """Each of N simultaneous reads adds exactly one view."""
        # Arrange
        async with integration_app() as request_container:
            tag_repo = await request_container.get(TagRepository)
            question_repo = await request_container.get(QuestionRepository)
            tag = await tag_repo.save(_tag(f"t{uuid4().hex[:12]}"))
            question = await question_repo.save(
                Question(
                    id=QuestionId(uuid4()),
                    title="Title",
                    text="Text",
                    tag_ids=[tag.id],
                    asked_by="alice",
                    asked_at=_now(),
                )
            )

        async def view() -> None:
            async with integration_app() as request_container:
                repo = await request_container.get(QuestionRepository)
                await repo.increment_views(question.id)

        # Act
        await asyncio.gather(*(view() for _ in range(8)))

        # Assert
        async with integration_app() as request_container:
            repo = await request_container.get(QuestionRepository)
            stored = await repo.find_by_id(question.id)
        assert stored is not None
        assert stored.views == 8

    @pytest.mark.asyncio
    async def test_same_voter_double_vote_counts_once(self, integration_app):
        """Two requests by one voter that both saw NOT_VOTED add one vote."""
        # Arrange
        async with integration_app() as request_container:
            user_repo = await request_container.get(UserRepository)
            answer_repo = await request_container.get(AnswerRepository)
            voter = await user_repo.save(make_user(f"u{uuid4().hex[:8]}"))
            answer = await answer_repo.save(
                Answer(
                    id=AnswerId(uuid4()),
                    text="Answer",
                    answered_by="bob",
                    answered_at=_now(),
                )
            )

        async def vote() -> None:
            async with integration_app() as request_container:
                repo = await request_container.get(AnswerRepository)
                await repo.add_voter(answer.id, voter.id)

        # Act
        await asyncio.gather(vote(), vote())

        # Assert
        async with integration_app() as request_container:
            repo = await request_container.get(AnswerRepository)
            stored = await repo.find_by_id(answer.id)
        assert stored is not None
        assert stored.votes == len(stored.voted_by) == 1
        assert stored.voted_by == frozenset({voter.id})
