"""Follow use cases."""

from .follow_tag import FollowTagRequest, FollowTagResponse, FollowTagUseCase
from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase

__all__ = [
    "FollowTagRequest",
    "FollowTagResponse",
    "FollowTagUseCase",
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
]
