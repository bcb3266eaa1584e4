"""Comment entity.

Comments are embedded inside the post they belong to. Threading is one
level deep: a comment either sits at the top level (parent_id 0) or
replies to another comment of the same post.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import AccountId, AuthorSnapshot, CommentId

TOP_LEVEL = CommentId(0)


class Comment(DomainModel):
    """Comment embedded in a post.

    Ids are local to the post, start at 1 and are never reused. Comments
    can be edited by their author but never deleted.
    """

    id: CommentId
    content: str = Field(min_length=1)
    author: AuthorSnapshot
    parent_id: CommentId = TOP_LEVEL
    interact_count: int = Field(default=0, ge=0)
    interact_members: list[AccountId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id != TOP_LEVEL

    def has_interacted(self, account_id: AccountId | None) -> bool:
        """Check whether the account reacted to this comment."""
        return account_id is not None and account_id in self.interact_members
