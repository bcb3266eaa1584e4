"""Domain model entities for Quill."""

from quill.domain.model.account import Account
from quill.domain.model.comment import TOP_LEVEL, Comment
from quill.domain.model.post import Post
from quill.domain.model.tag import Tag

__all__ = [
    "Account",
    "Comment",
    "Post",
    "Tag",
    "TOP_LEVEL",
]
