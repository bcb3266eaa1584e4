"""Repository interfaces for Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from quill.domain.repository.account import AccountRepository
from quill.domain.repository.post import PostRepository, feed_sort_key
from quill.domain.repository.tag import TagRepository

__all__ = [
    "AccountRepository",
    "PostRepository",
    "TagRepository",
    "feed_sort_key",
]
