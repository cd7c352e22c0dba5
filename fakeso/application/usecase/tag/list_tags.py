"""List tags use case."""

import logfire
from pydantic import BaseModel

from fakeso.domain.service import TagService

from fakeso.application.usecase.common import TagCountItem


class ListTagsRequest(BaseModel):
    """List tags request (no parameters)."""


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagCountItem]


class ListTagsUseCase:
    """Use case for listing every tag with its question count."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Every tag, including unused ones with a count of 0
        """
        with logfire.span("list_tags.execute"):
            counts = await self.tag_service.count_questions_per_tag()
            items = [TagCountItem.from_domain(c) for c in counts]
            logfire.info("Tags listed", count=len(items))
            return ListTagsResponse(tags=items)
