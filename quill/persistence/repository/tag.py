"""MongoDB implementation of Tag repository."""

from typing import Optional

import logfire
from motor.motor_asyncio import AsyncIOMotorDatabase

from quill.config import Settings
from quill.domain.model import Tag
from quill.domain.repository.tag import TagRepository
from quill.domain.value import TagId, TagType
from quill.persistence.database import store_errors
from quill.persistence.mappers import doc_to_tag, tag_to_doc


class MongoTagRepository(TagRepository):
    """MongoDB implementation of TagRepository."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings) -> None:
        self.collection = db[settings.mongo.tags_collection]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        with store_errors("tag.find_by_id"):
            doc = await self.collection.find_one({"_id": tag_id})
        return doc_to_tag(doc) if doc else None

    async def find_by_value(self, value: str) -> Optional[Tag]:
        with store_errors("tag.find_by_value"):
            doc = await self.collection.find_one({"value": value})
        return doc_to_tag(doc) if doc else None

    async def find_by_values(self, values: list[str]) -> list[Tag]:
        if not values:
            return []
        with store_errors("tag.find_by_values"):
            docs = await self.collection.find({"value": {"$in": values}}).to_list(
                length=None
            )
        return [doc_to_tag(doc) for doc in docs]

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        if not tag_ids:
            return []
        with store_errors("tag.find_by_ids"):
            docs = await self.collection.find({"_id": {"$in": tag_ids}}).to_list(
                length=None
            )
        return [doc_to_tag(doc) for doc in docs]

    async def find_all(self, tag_type: Optional[TagType] = None) -> list[Tag]:
        query = {"type": tag_type.value} if tag_type else {}
        with store_errors("tag.find_all"):
            docs = await self.collection.find(query).sort("_id", 1).to_list(length=None)
        return [doc_to_tag(doc) for doc in docs]

    async def next_id(self) -> TagId:
        with store_errors("tag.next_id"):
            doc = await self.collection.find_one(
                {}, projection={"_id": 1}, sort=[("_id", -1)]
            )
        return TagId(doc["_id"] + 1 if doc else 1)

    async def insert(self, tag: Tag) -> Tag:
        with logfire.span("tag_repository.insert", tag_id=tag.id, value=tag.value):
            with store_errors("tag.insert", resource="tag"):
                await self.collection.insert_one(tag_to_doc(tag))
            return tag

    async def replace(self, tag: Tag) -> Tag:
        with store_errors("tag.replace", resource="tag"):
            await self.collection.replace_one({"_id": tag.id}, tag_to_doc(tag))
        return tag

    async def set_post_count(self, tag_id: TagId, post_count: int) -> None:
        with store_errors("tag.set_post_count"):
            await self.collection.update_one(
                {"_id": tag_id}, {"$set": {"post": post_count}}
            )
