"""Post aggregate root.

A post document owns its comments, its reaction list and the list of
accounts that bookmarked it. Counters are denormalized next to the lists
they summarize and must be kept equal to their length by every write.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.comment import Comment
from quill.domain.model.common import DomainModel
from quill.domain.value import AccountId, AuthorSnapshot, CommentId, PostId, PostStatus


class Post(DomainModel):
    """Post aggregate root.

    Invariants maintained by the domain services:
    - reaction_count == len(reaction_members)
    - comment_count == len(comments)
    - every account in saved_by has this post in its reading list
    """

    id: PostId
    slug: str = Field(min_length=1)
    author: AuthorSnapshot
    title: str = Field(min_length=1)
    content: str = ""
    banner: Optional[str] = None
    status: PostStatus = PostStatus.PUBLISHED
    tags: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    comment_count: int = Field(default=0, ge=0)
    reaction_count: int = Field(default=0, ge=0)
    reaction_members: list[AccountId] = Field(default_factory=list)
    commenters: list[AccountId] = Field(default_factory=list)
    saved_by: list[AccountId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    def is_owned_by(self, username: str) -> bool:
        """Ownership is decided by the author snapshot's username."""
        return self.author.username == username

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Find an embedded comment by its local id."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def next_comment_id(self) -> CommentId:
        """Next local comment id: highest existing id + 1, starting at 1."""
        return CommentId(max((c.id for c in self.comments), default=0) + 1)
