"""Domain value objects for Quill."""

from quill.domain.value.identifiers import AccountId, CommentId, PostId, TagId
from quill.domain.value.types import (
    AccountStatus,
    AuthorSnapshot,
    PostStatus,
    ReactionTarget,
    TagType,
    ToggleResult,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CommentId",
    "PostId",
    "TagId",
    # Types
    "AccountStatus",
    "AuthorSnapshot",
    "PostStatus",
    "ReactionTarget",
    "TagType",
    "ToggleResult",
]
