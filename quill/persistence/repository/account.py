"""MongoDB implementation of Account repository."""

import re
from typing import Optional

import logfire
from motor.motor_asyncio import AsyncIOMotorDatabase

from quill.config import Settings
from quill.domain.model import Account
from quill.domain.repository.account import AccountRepository
from quill.domain.value import AccountId, AccountStatus, PostId, TagId
from quill.persistence.database import store_errors
from quill.persistence.mappers import account_to_doc, doc_to_account

PROFILE_KEYS = ("name", "avatar", "bio", "website", "privateEmail", "updatedAt")


class MongoAccountRepository(AccountRepository):
    """MongoDB implementation of AccountRepository.

    Relationship lists are updated with ``$addToSet`` and ``$pull`` so a
    repeated add or remove never produces a duplicate member.
    """

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings) -> None:
        """Initialize repository with a database handle.

        Args:
            db: Motor database
            settings: Application settings
        """
        self.collection = db[settings.mongo.accounts_collection]

    async def _update(self, operation: str, account_id: AccountId, update: dict) -> None:
        with store_errors(f"account.{operation}"):
            await self.collection.update_one({"_id": account_id}, update)

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        with store_errors("account.find_by_id"):
            doc = await self.collection.find_one({"_id": account_id})
        return doc_to_account(doc) if doc else None

    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find an account by username."""
        with logfire.span("account_repository.find_by_username", username=username):
            with store_errors("account.find_by_username"):
                doc = await self.collection.find_one({"username": username})
            return doc_to_account(doc) if doc else None

    async def find_by_ids(self, account_ids: list[AccountId]) -> list[Account]:
        """Find multiple accounts by ID."""
        if not account_ids:
            return []
        with store_errors("account.find_by_ids"):
            docs = await self.collection.find({"_id": {"$in": account_ids}}).to_list(
                length=None
            )
        return [doc_to_account(doc) for doc in docs]

    async def search_by_username(self, keyword: str) -> list[Account]:
        """Substring search over usernames."""
        query = {"username": {"$regex": re.escape(keyword), "$options": "i"}}
        with store_errors("account.search_by_username"):
            docs = await self.collection.find(query).sort("_id", 1).to_list(length=None)
        return [doc_to_account(doc) for doc in docs]

    async def next_id(self) -> AccountId:
        """Return the highest account id + 1."""
        with store_errors("account.next_id"):
            doc = await self.collection.find_one(
                {}, projection={"_id": 1}, sort=[("_id", -1)]
            )
        return AccountId(doc["_id"] + 1 if doc else 1)

    async def insert(self, account: Account) -> Account:
        """Insert a new account."""
        with store_errors("account.insert", resource="account"):
            await self.collection.insert_one(account_to_doc(account))
        return account

    async def find_all(self) -> list[Account]:
        """Every account in id order."""
        with logfire.span("account_repository.find_all"):
            with store_errors("account.find_all"):
                cursor = self.collection.find({}).sort("_id", 1)
                docs = await cursor.to_list(length=None)
            return [doc_to_account(doc) for doc in docs]

    async def set_profile(self, account: Account) -> None:
        """Set the profile fields, leaving relationship lists untouched."""
        doc = account_to_doc(account)
        await self._update(
            "set_profile",
            account.id,
            {"$set": {key: doc[key] for key in PROFILE_KEYS}},
        )

    async def set_status(self, account_id: AccountId, status: AccountStatus) -> None:
        """Set the moderation status."""
        await self._update("set_status", account_id, {"$set": {"status": status.value}})

    async def add_to_reading_list(self, account_id: AccountId, post_id: PostId) -> None:
        """Add a post to readingList."""
        await self._update(
            "add_to_reading_list", account_id, {"$addToSet": {"readingList": post_id}}
        )

    async def remove_from_reading_list(
        self, account_id: AccountId, post_id: PostId
    ) -> None:
        """Remove a post from readingList."""
        await self._update(
            "remove_from_reading_list", account_id, {"$pull": {"readingList": post_id}}
        )

    async def remove_from_all_reading_lists(self, post_id: PostId) -> int:
        """Pull a post id out of every readingList."""
        with store_errors("account.remove_from_all_reading_lists"):
            result = await self.collection.update_many(
                {"readingList": post_id}, {"$pull": {"readingList": post_id}}
            )
        return result.modified_count

    async def add_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        """Add a tag to followedTag."""
        await self._update(
            "add_followed_tag", account_id, {"$addToSet": {"followedTag": tag_id}}
        )

    async def remove_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        """Remove a tag from followedTag."""
        await self._update(
            "remove_followed_tag", account_id, {"$pull": {"followedTag": tag_id}}
        )

    async def add_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        """Add an account to followedUser."""
        await self._update(
            "add_followed_user", account_id, {"$addToSet": {"followedUser": followee_id}}
        )

    async def remove_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        """Remove an account from followedUser."""
        await self._update(
            "remove_followed_user", account_id, {"$pull": {"followedUser": followee_id}}
        )
