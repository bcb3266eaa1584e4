"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
