"""Unit tests for the Answer entity and activity computation."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from fakeso.domain.model import Answer
from fakeso.domain.model.question import most_recent_activity
from fakeso.domain.value import AnswerId, UserId, VoteState


def _answer(answered_at: datetime, voters: frozenset = frozenset()) -> Answer:
    return Answer(
        id=AnswerId(uuid4()),
        text="Use a context provider.",
        answered_by="bob",
        answered_at=answered_at,
        votes=len(voters),
        voted_by=voters,
    )


class TestAnswerVoteInvariant:
    """Vote counter and voter set stay in step."""

    def test_counter_must_match_voters(self):
        """A counter that disagrees with the voter set is rejected."""
        with pytest.raises(ValidationError):
            Answer(
                id=AnswerId(uuid4()),
                text="text",
                answered_by="bob",
                answered_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
                votes=2,
                voted_by=frozenset({UserId(uuid4())}),
            )

    def test_negative_votes_rejected(self):
        """Votes never go below zero."""
        with pytest.raises(ValidationError):
            Answer(
                id=AnswerId(uuid4()),
                text="text",
                answered_by="bob",
                answered_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
                votes=-1,
            )

    def test_naive_answer_date_rejected(self):
        """Timestamps must carry a timezone."""
        with pytest.raises(ValidationError):
            _answer(datetime(2023, 1, 1))

    def test_vote_state(self):
        """A voter in the set is VOTED, anyone else NOT_VOTED."""
        voter = UserId(uuid4())
        answer = _answer(datetime(2023, 1, 1, tzinfo=timezone.utc), frozenset({voter}))

        assert answer.vote_state(voter) is VoteState.VOTED
        assert answer.vote_state(UserId(uuid4())) is VoteState.NOT_VOTED
        assert VoteState.VOTED.toggled() is VoteState.NOT_VOTED
        assert VoteState.NOT_VOTED.toggled() is VoteState.VOTED


class TestMostRecentActivity:
    """Tests for most_recent_activity."""

    def test_no_answers_is_ask_date(self):
        asked_at = datetime(2023, 1, 1, tzinfo=timezone.utc)

        assert most_recent_activity(asked_at, []) == asked_at

    def test_latest_answer_wins(self):
        """The latest answer date is used when after the ask date."""
        march = datetime(2023, 3, 1, tzinfo=timezone.utc)
        answers = [_answer(march), _answer(datetime(2023, 2, 1, tzinfo=timezone.utc))]

        asked_at = datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert most_recent_activity(asked_at, answers) == march
