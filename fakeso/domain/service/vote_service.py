"""Vote domain service."""

import logfire

from fakeso.domain.error import NotFoundError
from fakeso.domain.model import Answer
from fakeso.domain.repository import AnswerRepository
from fakeso.domain.value import AnswerId, UserId, VoteState

from .base import Service
from .user_service import UserService


class VoteService(Service):
    """Domain service for answer votes.

    Each (answer, voter) pair is a two-state machine, NOT_VOTED and VOTED.
    A toggle performs exactly one transition.
    """

    def __init__(
        self, answer_repository: AnswerRepository, user_service: UserService
    ) -> None:
        """Initialize vote service.

        Args:
            answer_repository: Answer repository
            user_service: User domain service
        """
        self.answer_repository = answer_repository
        self.user_service = user_service

    async def toggle_vote(self, answer_id: AnswerId, voter_id: UserId) -> Answer:
        """Toggle a voter's vote on an answer.

        VOTED -> NOT_VOTED removes the voter and decrements the counter
        (never below 0). NOT_VOTED -> VOTED adds the voter and increments it.
        Both are single atomic repository operations, so concurrent votes by
        different voters are never lost.

        Args:
            answer_id: Answer ID
            voter_id: Voter's user ID

        Returns:
            Updated answer

        Raises:
            NotFoundError: If the answer does not exist
            InvalidReferenceError: If the voter does not exist
        """
        with logfire.span(
            "vote_service.toggle_vote", answer_id=str(answer_id), voter_id=str(voter_id)
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            await self.user_service.require_user(voter_id)

            current = answer.vote_state(voter_id)
            target = current.toggled()
            if target is VoteState.VOTED:
                updated = await self.answer_repository.add_voter(answer_id, voter_id)
            else:
                updated = await self.answer_repository.remove_voter(answer_id, voter_id)

            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Vote toggled",
                answer_id=str(answer_id),
                voter_id=str(voter_id),
                state=target.value,
                votes=updated.votes,
            )
            return updated
