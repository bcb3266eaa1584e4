"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from quill.config import Settings
from quill.domain.repository import AccountRepository, PostRepository, TagRepository
from quill.persistence.database import create_client, get_database
from quill.persistence.repository import (
    MongoAccountRepository,
    MongoPostRepository,
    MongoTagRepository,
)
from quill.util.di.base import ProviderBase
from quill.util.observability import instrument_pymongo


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using MongoDB.

    One client per process; repositories are built per request on top of
    the shared database handle. No multi-document transactions are opened.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_client(self, settings: Settings) -> AsyncIterator[AsyncIOMotorClient]:
        """Provide the Mongo client, closed when the container shuts down."""
        instrument_pymongo()
        client = create_client(settings)
        yield client
        client.close()
        logfire.info("Mongo client closed")

    @provide(scope=Scope.APP)
    def get_database(
        self, client: AsyncIOMotorClient, settings: Settings
    ) -> AsyncIOMotorDatabase:
        """Provide the application database."""
        return get_database(client, settings)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self, db: AsyncIOMotorDatabase, settings: Settings
    ) -> PostRepository:
        """Provide Post repository."""
        return MongoPostRepository(db, settings)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(
        self, db: AsyncIOMotorDatabase, settings: Settings
    ) -> TagRepository:
        """Provide Tag repository."""
        return MongoTagRepository(db, settings)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(
        self, db: AsyncIOMotorDatabase, settings: Settings
    ) -> AccountRepository:
        """Provide Account repository."""
        return MongoAccountRepository(db, settings)
