"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagResponse, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "UpdateTagRequest",
    "UpdateTagResponse",
    "UpdateTagUseCase",
]
