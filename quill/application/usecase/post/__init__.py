"""Post use cases."""

from .change_post_status import (
    ChangePostStatusRequest,
    ChangePostStatusResponse,
    ChangePostStatusUseCase,
)
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_all_posts import (
    ListAllPostsRequest,
    ListAllPostsResponse,
    ListAllPostsUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "ChangePostStatusRequest",
    "ChangePostStatusResponse",
    "ChangePostStatusUseCase",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListAllPostsRequest",
    "ListAllPostsResponse",
    "ListAllPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
