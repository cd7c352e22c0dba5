"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from fakeso.domain.error import InvalidOrderError
from fakeso.domain.value.common import RootValueObject


class TagName(RootValueObject[str]):
    """Name of a tag as typed by the asker.

    Surrounding whitespace is dropped, 1-20 characters remain.
    Examples: 'react', 'node.js', 'C#'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Strip and validate length."""
        v = v.strip()
        if not 1 <= len(v) <= 20:
            raise ValueError("Tag name must be 1-20 characters")
        if any(ch.isspace() for ch in v):
            raise ValueError("Tag name cannot contain whitespace")
        return v

    @property
    def key(self) -> str:
        """Case-folded form used for uniqueness and matching."""
        return self.root.lower()


class QuestionSortOrder(str, Enum):
    """Named retrieval strategies for question listings."""

    NEWEST = "newest"  # asked_at DESC
    ACTIVE = "active"  # most recent answer (or ask date) DESC
    UNANSWERED = "unanswered"  # no answers, asked_at DESC

    @classmethod
    def parse(cls, key: str | None) -> "QuestionSortOrder":
        """Resolve an external order key.

        A missing key means ``newest``; an unknown key is rejected.

        Raises:
            InvalidOrderError: If the key names no strategy
        """
        if key is None or key == "":
            return cls.NEWEST
        try:
            return cls(key)
        except ValueError:
            raise InvalidOrderError(key) from None


class VoteState(str, Enum):
    """State of one voter on one answer."""

    NOT_VOTED = "not_voted"
    VOTED = "voted"

    def toggled(self) -> "VoteState":
        return VoteState.NOT_VOTED if self is VoteState.VOTED else VoteState.VOTED
