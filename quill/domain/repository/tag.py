"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.tag import Tag
from quill.domain.value import TagId, TagType


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        pass

    @abstractmethod
    async def find_by_value(self, value: str) -> Optional[Tag]:
        """Find tag by its unique value."""
        pass

    @abstractmethod
    async def find_by_values(self, values: list[str]) -> list[Tag]:
        """Find multiple tags by value (missing values are skipped)."""
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID (missing ids are skipped)."""
        pass

    @abstractmethod
    async def find_all(self, tag_type: Optional[TagType] = None) -> list[Tag]:
        """Find all tags, optionally restricted to one type."""
        pass

    @abstractmethod
    async def next_id(self) -> TagId:
        """Return the highest existing tag id + 1 (1 for an empty store)."""
        pass

    @abstractmethod
    async def insert(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        pass

    @abstractmethod
    async def replace(self, tag: Tag) -> Tag:
        """Replace the whole tag document."""
        pass

    @abstractmethod
    async def set_post_count(self, tag_id: TagId, post_count: int) -> None:
        """Overwrite the tag's post counter."""
        pass
