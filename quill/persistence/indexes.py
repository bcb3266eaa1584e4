"""Index bootstrap for the document store."""

import logfire
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from quill.config import Settings

FEED_SORT = [
    ("createdAt", DESCENDING),
    ("reactionCount", DESCENDING),
    ("commentCount", DESCENDING),
]


async def ensure_indexes(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """Create the indexes the repositories rely on.

    Unique indexes back slug, username and tag value uniqueness. The
    compound indexes serve the feed ordering.

    Args:
        db: Application database
        settings: Application settings with collection names
    """
    posts = db[settings.mongo.posts_collection]
    accounts = db[settings.mongo.accounts_collection]
    tags = db[settings.mongo.tags_collection]

    with logfire.span("persistence.ensure_indexes", database=db.name):
        await posts.create_index("slug", unique=True)
        await posts.create_index([("status", ASCENDING), *FEED_SORT])
        await posts.create_index([("userUserName", ASCENDING), *FEED_SORT])
        await posts.create_index("tag")
        await posts.create_index("comment.userUserName")
        await accounts.create_index("username", unique=True)
        await accounts.create_index("readingList")
        await tags.create_index("value", unique=True)
        logfire.info("Indexes ensured", database=db.name)
