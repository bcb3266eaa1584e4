"""Tag entity for categorizing posts."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import AccountId, TagId, TagType


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Posts reference tags by ``value``, not by id, so the value is immutable
    once created. ``post_count`` is maintained by the tag usage counter on
    post creation and deletion only.
    """

    id: TagId
    value: str = Field(min_length=1, max_length=64)
    description: str = ""
    color: str = ""
    image: str = ""
    type: TagType = TagType.TAG
    post_count: int = Field(default=0, ge=0)
    moderators: list[AccountId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
