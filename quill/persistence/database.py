"""Document store connection management.

Provides the async MongoDB client and database handle. Both are created
once per process by the DI container and injected into repositories.
"""

from contextlib import contextmanager
from typing import Iterator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from quill.config import Settings
from quill.domain.error import DuplicateError, ServerError


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create async MongoDB client.

    Args:
        settings: Application settings with the Mongo URL

    Returns:
        Configured motor client (connects lazily)
    """
    return AsyncIOMotorClient(
        settings.mongo.url,
        serverSelectionTimeoutMS=settings.mongo.server_selection_timeout_ms,
        appname="quill-api",
    )


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the application database from a client."""
    return client[settings.mongo.database]


@contextmanager
def store_errors(operation: str, resource: str = "document") -> Iterator[None]:
    """Translate driver failures into domain errors.

    A unique index violation becomes ``DuplicateError``; any other driver
    failure becomes ``ServerError``. Nothing is retried.

    Args:
        operation: Name of the repository operation, used in the message
        resource: Resource name reported on duplicate key violations
    """
    try:
        yield
    except DuplicateKeyError as e:
        key = (e.details or {}).get("keyValue", "")
        raise DuplicateError(resource, str(key)) from e
    except PyMongoError as e:
        raise ServerError(f"store failure during {operation}: {e}") from e
