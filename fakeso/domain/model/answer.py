"""Answer entity with its embedded vote and comment ledgers."""

from pydantic import AwareDatetime, Field, model_validator

from fakeso.domain.model.common import DomainModel
from fakeso.domain.value import AnswerId, CommentId, UserId, VoteState


class Comment(DomainModel):
    """Comment on an answer.

    Comments are append-only and kept in insertion order by their answer.
    """

    id: CommentId
    text: str = Field(min_length=1)
    commented_by: UserId
    commented_at: AwareDatetime


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - ``votes`` always equals the number of distinct voters
    - a voter is either in ``voted_by`` or not (see ``VoteState``)
    - comments are only ever appended
    """

    id: AnswerId
    text: str = Field(min_length=1)
    answered_by: str = Field(min_length=1, max_length=255)
    answered_at: AwareDatetime
    votes: int = Field(default=0, ge=0)
    voted_by: frozenset[UserId] = frozenset()
    comments: list[Comment] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_vote_count(self) -> "Answer":
        """Keep the counter and the voter set in step."""
        if self.votes != len(self.voted_by):
            raise ValueError(
                f"Answer {self.id} has {self.votes} votes "
                f"but {len(self.voted_by)} voters"
            )
        return self

    def vote_state(self, voter_id: UserId) -> VoteState:
        """Current state of ``voter_id`` on this answer."""
        return VoteState.VOTED if voter_id in self.voted_by else VoteState.NOT_VOTED
