"""MongoDB implementation of Post repository."""

import re
from typing import Any, Optional

import logfire
from motor.motor_asyncio import AsyncIOMotorDatabase

from quill.config import Settings
from quill.domain.model import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import AccountId, CommentId, PostId, PostStatus
from quill.persistence.database import store_errors
from quill.persistence.indexes import FEED_SORT
from quill.persistence.mappers import doc_to_post, post_to_doc

PUBLISHED = PostStatus.PUBLISHED.value


def _contains(keyword: str) -> dict[str, Any]:
    """Case-insensitive substring filter."""
    return {"$regex": re.escape(keyword), "$options": "i"}


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository.

    Comments are embedded in the post document. Reaction updates use a
    membership guard in the filter so the list and the counter move in
    the same single-document write.
    """

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings) -> None:
        """Initialize repository with a database handle.

        Args:
            db: Motor database
            settings: Application settings
        """
        self.collection = db[settings.mongo.posts_collection]
        self.settings = settings

    async def _find_many(
        self,
        query: dict[str, Any],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        cursor = self.collection.find(query).sort(FEED_SORT)
        if offset:
            cursor = cursor.skip(offset)
        if limit:
            cursor = cursor.limit(limit)
        with store_errors("post.find"):
            docs = await cursor.to_list(length=None)
        return [doc_to_post(doc) for doc in docs]

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=slug):
            with store_errors("post.find_by_slug"):
                doc = await self.collection.find_one({"slug": slug})

            if not doc:
                logfire.warn("Post not found by slug", slug=slug)
                return None

            return doc_to_post(doc)

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find multiple posts by ID."""
        if not post_ids:
            return []
        return await self._find_many({"_id": {"$in": post_ids}})

    async def slug_exists(self, slug: str) -> bool:
        """Check if a slug is already taken."""
        with store_errors("post.slug_exists"):
            count = await self.collection.count_documents({"slug": slug}, limit=1)
        return count > 0

    async def next_id(self) -> PostId:
        """Return the highest post id + 1."""
        with store_errors("post.next_id"):
            doc = await self.collection.find_one(
                {}, projection={"_id": 1}, sort=[("_id", -1)]
            )
        return PostId(doc["_id"] + 1 if doc else 1)

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span("post_repository.insert", post_id=post.id, slug=post.slug):
            with store_errors("post.insert", resource="post"):
                await self.collection.insert_one(post_to_doc(post))
            return post

    async def replace(self, post: Post) -> Post:
        """Replace the whole post document."""
        with logfire.span("post_repository.replace", post_id=post.id):
            with store_errors("post.replace", resource="post"):
                await self.collection.replace_one({"_id": post.id}, post_to_doc(post))
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post document."""
        with store_errors("post.delete"):
            result = await self.collection.delete_one({"_id": post_id})
        return result.deleted_count > 0

    async def set_status(self, post_id: PostId, status: PostStatus) -> None:
        """Set the lifecycle status of a post."""
        with store_errors("post.set_status"):
            await self.collection.update_one(
                {"_id": post_id}, {"$set": {"status": status.value}}
            )

    async def add_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        """Push the account into reactionList if absent, incrementing the count."""
        with store_errors("post.add_reaction"):
            result = await self.collection.update_one(
                {"_id": post_id, "reactionList": {"$ne": account_id}},
                {"$push": {"reactionList": account_id}, "$inc": {"reactionCount": 1}},
            )
        return result.modified_count > 0

    async def remove_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        """Pull the account from reactionList if present, decrementing the count."""
        with store_errors("post.remove_reaction"):
            result = await self.collection.update_one(
                {"_id": post_id, "reactionList": account_id},
                {"$pull": {"reactionList": account_id}, "$inc": {"reactionCount": -1}},
            )
        return result.modified_count > 0

    async def add_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        """Add a reaction to one embedded comment, addressed positionally."""
        with store_errors("post.add_comment_reaction"):
            result = await self.collection.update_one(
                {
                    "_id": post_id,
                    "comment": {
                        "$elemMatch": {
                            "_id": comment_id,
                            "interactList": {"$ne": account_id},
                        }
                    },
                },
                {
                    "$push": {"comment.$.interactList": account_id},
                    "$inc": {"comment.$.interact": 1},
                },
            )
        return result.modified_count > 0

    async def remove_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        """Remove a reaction from one embedded comment, addressed positionally."""
        with store_errors("post.remove_comment_reaction"):
            result = await self.collection.update_one(
                {
                    "_id": post_id,
                    "comment": {
                        "$elemMatch": {"_id": comment_id, "interactList": account_id}
                    },
                },
                {
                    "$pull": {"comment.$.interactList": account_id},
                    "$inc": {"comment.$.interact": -1},
                },
            )
        return result.modified_count > 0

    async def add_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        """Add the account to savedByUser."""
        with store_errors("post.add_saved_by"):
            await self.collection.update_one(
                {"_id": post_id}, {"$addToSet": {"savedByUser": account_id}}
            )

    async def remove_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        """Remove the account from savedByUser."""
        with store_errors("post.remove_saved_by"):
            await self.collection.update_one(
                {"_id": post_id}, {"$pull": {"savedByUser": account_id}}
            )

    async def find_published(self, limit: int, offset: int = 0) -> list[Post]:
        """Find published posts in feed order."""
        with logfire.span("post_repository.find_published", limit=limit, offset=offset):
            return await self._find_many({"status": PUBLISHED}, limit, offset)

    async def find_all_published(self) -> list[Post]:
        """Find every published post in feed order."""
        return await self._find_many({"status": PUBLISHED})

    async def find_published_by_author(
        self, username: str, limit: Optional[int] = None
    ) -> list[Post]:
        """Find published posts by an author."""
        return await self._find_many(
            {"status": PUBLISHED, "userUserName": username}, limit
        )

    async def find_by_author(self, username: str) -> list[Post]:
        """Find every post by an author, drafts included."""
        return await self._find_many({"userUserName": username})

    async def find_published_by_tag(self, tag_value: str) -> list[Post]:
        """Find published posts carrying a tag value."""
        return await self._find_many({"status": PUBLISHED, "tag": tag_value})

    async def search_published(self, keyword: str) -> list[Post]:
        """Substring search over title and content of published posts."""
        with logfire.span("post_repository.search_published", keyword=keyword):
            return await self._find_many(
                {
                    "status": PUBLISHED,
                    "$or": [
                        {"title": _contains(keyword)},
                        {"content": _contains(keyword)},
                    ],
                }
            )

    async def search_by_comment_content(self, keyword: str) -> list[Post]:
        """Substring search over embedded comment content of published posts."""
        return await self._find_many(
            {"status": PUBLISHED, "comment.content": _contains(keyword)}
        )

    async def find_by_comment_author(self, username: str) -> list[Post]:
        """Find posts holding a comment by the username."""
        return await self._find_many({"comment.userUserName": username})

    async def update_author_snapshot(
        self, username: str, name: Optional[str] = None, avatar: Optional[str] = None
    ) -> int:
        """Cascade profile fields into every post by the username."""
        fields: dict[str, Any] = {}
        if name is not None:
            fields["userName"] = name
        if avatar is not None:
            fields["userAvatar"] = avatar
        if not fields:
            return 0

        with logfire.span("post_repository.update_author_snapshot", username=username):
            with store_errors("post.update_author_snapshot"):
                result = await self.collection.update_many(
                    {"userUserName": username}, {"$set": fields}
                )
            logfire.info(
                "Author snapshot cascaded",
                username=username,
                modified=result.modified_count,
            )
            return result.modified_count
