"""Tag domain service.

Also hosts the tag usage counter: ``post_count`` moves by read-then-write
per tag when posts are created or deleted. The counter is not adjusted
when an edit changes a post's tag set.
"""

from datetime import datetime
from typing import Optional

import logfire

from quill.domain.error import DuplicateError, NotFoundError
from quill.domain.model import Tag
from quill.domain.repository import TagRepository
from quill.domain.value import TagId, TagType

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_tag_by_value(self, value: str) -> Tag:
        """Get a tag by value.

        Raises:
            NotFoundError: If no tag has this value
        """
        tag = await self.tag_repository.find_by_value(value)
        if tag is None:
            logfire.warn("Tag not found", value=value)
            raise NotFoundError("tag", value)
        return tag

    async def resolve_tags(self, values: list[str]) -> list[Tag]:
        """Validate that every tag value exists.

        Args:
            values: Tag values referenced by a post

        Returns:
            Tags in the order requested

        Raises:
            NotFoundError: Naming the first missing value
        """
        with logfire.span("tag_service.resolve_tags", tags=values):
            found = {t.value: t for t in await self.tag_repository.find_by_values(values)}
            for value in values:
                if value not in found:
                    logfire.warn("Post references unknown tag", value=value)
                    raise NotFoundError("tag", value)
            return [found[v] for v in values]

    async def increment_usage(self, values: list[str]) -> None:
        """Add one to the post count of each tag value."""
        await self._adjust_usage(values, 1)

    async def decrement_usage(self, values: list[str]) -> None:
        """Subtract one from the post count of each tag value (floored at 0)."""
        await self._adjust_usage(values, -1)

    async def _adjust_usage(self, values: list[str], delta: int) -> None:
        with logfire.span("tag_service.adjust_usage", tags=values, delta=delta):
            for value in values:
                tag = await self.tag_repository.find_by_value(value)
                if tag is None:
                    # Tag vanished since the post was validated
                    logfire.warn("Skipping usage update for missing tag", value=value)
                    continue
                new_count = max(0, tag.post_count + delta)
                await self.tag_repository.set_post_count(tag.id, new_count)
                logfire.info("Tag usage updated", value=value, post_count=new_count)

    async def create_tag(
        self,
        value: str,
        description: str = "",
        color: str = "",
        image: str = "",
        tag_type: TagType = TagType.TAG,
    ) -> Tag:
        """Create a new tag with a zero post count.

        Raises:
            DuplicateError: If the value is already taken
        """
        with logfire.span("tag_service.create_tag", value=value):
            if await self.tag_repository.find_by_value(value):
                logfire.warn("Duplicate tag value", value=value)
                raise DuplicateError("tag", value)

            now = datetime.now()
            tag = Tag(
                id=await self.tag_repository.next_id(),
                value=value,
                description=description,
                color=color,
                image=image,
                type=tag_type,
                created_at=now,
                updated_at=now,
            )
            saved = await self.tag_repository.insert(tag)
            logfire.info("Tag created", tag_id=saved.id, value=value)
            return saved

    async def update_tag(
        self,
        tag_id: TagId,
        description: Optional[str] = None,
        color: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Tag:
        """Update a tag's presentation fields. The value never changes.

        Raises:
            NotFoundError: If the tag doesn't exist
        """
        with logfire.span("tag_service.update_tag", tag_id=tag_id):
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                raise NotFoundError("tag", tag_id)

            update: dict = {}
            if description is not None:
                update["description"] = description
            if color is not None:
                update["color"] = color
            if image is not None:
                update["image"] = image

            saved = await self.tag_repository.replace(tag.edited(**update))
            logfire.info("Tag updated", tag_id=tag_id)
            return saved

    async def list_tags(self, tag_type: Optional[TagType] = TagType.TAG) -> list[Tag]:
        """List tags, by default only those of type Tag."""
        return await self.tag_repository.find_all(tag_type)

    async def get_tags_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Get tags by id, skipping missing ones."""
        return await self.tag_repository.find_by_ids(tag_ids)
