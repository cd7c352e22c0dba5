"""User entity.

Only the projection of an account the forum core needs: a stable id, the
display name and the e-mail clients sometimes identify users by.
"""

from pydantic import AwareDatetime, Field

from fakeso.domain.model.common import DomainModel, utc_now
from fakeso.domain.value import UserId


class User(DomainModel):
    """User entity."""

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    created_at: AwareDatetime = Field(default_factory=utc_now)
