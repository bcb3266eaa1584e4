"""In-memory tag repository for testing."""

from typing import Optional

from quill.domain.model import Tag
from quill.domain.repository.tag import TagRepository
from quill.domain.value import TagId, TagType


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self._tags.get(tag_id)

    async def find_by_value(self, value: str) -> Optional[Tag]:
        for tag in self._tags.values():
            if tag.value == value:
                return tag
        return None

    async def find_by_values(self, values: list[str]) -> list[Tag]:
        return [t for t in self._tags.values() if t.value in values]

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        return [self._tags[i] for i in tag_ids if i in self._tags]

    async def find_all(self, tag_type: Optional[TagType] = None) -> list[Tag]:
        tags = sorted(self._tags.values(), key=lambda t: t.id)
        if tag_type is not None:
            tags = [t for t in tags if t.type == tag_type]
        return tags

    async def next_id(self) -> TagId:
        return TagId(max(self._tags, default=0) + 1)

    async def insert(self, tag: Tag) -> Tag:
        self._tags[tag.id] = tag
        return tag

    async def replace(self, tag: Tag) -> Tag:
        if tag.id in self._tags:
            self._tags[tag.id] = tag
        return tag

    async def set_post_count(self, tag_id: TagId, post_count: int) -> None:
        tag = self._tags.get(tag_id)
        if tag:
            self._tags[tag_id] = tag.model_copy(update={"post_count": post_count})
