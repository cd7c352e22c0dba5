"""Tag use cases."""

from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase

__all__ = [
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
]
