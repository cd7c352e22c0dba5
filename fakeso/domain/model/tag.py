"""Tag entity for categorizing questions."""

from pydantic import AwareDatetime, Field

from fakeso.domain.model.common import DomainModel, utc_now
from fakeso.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are shared between questions and created lazily the first time a
    question names them. Names are unique case-insensitively; the first
    spelling stored is the one displayed.
    """

    id: TagId
    name: TagName
    created_at: AwareDatetime = Field(default_factory=utc_now)

    @property
    def key(self) -> str:
        return self.name.key


class TagCount(DomainModel):
    """A tag together with the number of questions referencing it."""

    tag: Tag
    question_count: int = Field(ge=0)
