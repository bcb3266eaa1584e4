"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PostStatus(str, Enum):
    """Lifecycle status of a post.

    Only two states exist; owners flip between them explicitly.
    """

    DRAFT = "Draft"
    PUBLISHED = "Published"

    def toggled(self) -> "PostStatus":
        """Return the opposite status."""
        match self:
            case PostStatus.DRAFT:
                return PostStatus.PUBLISHED
            case PostStatus.PUBLISHED:
                return PostStatus.DRAFT


class AccountStatus(str, Enum):
    """Moderation status of an account."""

    ACTIVATED = "Activated"
    BANNED = "Banned"
    PENDING = "Pending"


class TagType(str, Enum):
    """Tag type for UI grouping."""

    CATEGORY = "Category"
    TAG = "Tag"


class ToggleResult(str, Enum):
    """Outcome of a membership toggle."""

    ADDED = "added"
    REMOVED = "removed"


class ReactionTarget(str, Enum):
    """Type of entity that can be reacted to."""

    POST = "post"
    COMMENT = "comment"


class AuthorSnapshot(BaseModel):
    """Denormalized copy of an account's public fields.

    Embedded in posts and comments at creation time. Post-level snapshots
    are refreshed by cascade when the account edits its profile.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1, max_length=64)
    name: str
    avatar: str = ""
