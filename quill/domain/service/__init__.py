"""Domain services."""

from .account_service import AccountService
from .base import Service
from .bookmark_service import BookmarkService
from .comment_service import AuthoredComment, CommentService
from .follow_service import FollowService
from .jwt_service import JWTService
from .post_service import PostService
from .reaction_service import ReactionService
from .tag_service import TagService

__all__ = [
    "AccountService",
    "AuthoredComment",
    "BookmarkService",
    "CommentService",
    "FollowService",
    "JWTService",
    "PostService",
    "ReactionService",
    "Service",
    "TagService",
]
