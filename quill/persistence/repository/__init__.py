"""MongoDB repository implementations."""

from quill.persistence.repository.account import MongoAccountRepository
from quill.persistence.repository.post import MongoPostRepository
from quill.persistence.repository.tag import MongoTagRepository

__all__ = [
    "MongoAccountRepository",
    "MongoPostRepository",
    "MongoTagRepository",
]
