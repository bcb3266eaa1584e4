"""Account aggregate root."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import AccountId, AccountStatus, AuthorSnapshot, PostId, TagId


class Account(DomainModel):
    """Account aggregate root.

    Relationship lists are kept only on the account's side: there is no
    reverse "followers" list on the followed account and no reverse list on
    tags. ``reading_list`` mirrors ``Post.saved_by``.
    """

    id: AccountId
    username: str = Field(min_length=1, max_length=64)
    name: str
    school_email: str = ""
    private_email: str = ""
    password_hash: str = ""
    avatar: str = ""
    bio: str = ""
    website: str = ""
    admin: bool = False
    status: AccountStatus = AccountStatus.PENDING
    followed_tags: list[TagId] = Field(default_factory=list)
    reading_list: list[PostId] = Field(default_factory=list)
    followed_users: list[AccountId] = Field(default_factory=list)
    last_access: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def snapshot(self) -> AuthorSnapshot:
        """Public fields copied into posts and comments."""
        return AuthorSnapshot(username=self.username, name=self.name, avatar=self.avatar)
