"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.post import Post
from quill.domain.value import AccountId, CommentId, PostId, PostStatus


def feed_sort_key(post: Post) -> tuple:
    """Composite ordering used by every post listing.

    Newest first, then most reactions, then most comments. Use with
    ``reverse=True``.
    """
    return (post.created_at, post.reaction_count, post.comment_count)


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Every method is a single document-store operation and therefore atomic
    on its own. Protocols that touch more than one document are composed
    by the domain services.
    """

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: The post's unique slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find multiple posts by ID (missing ids are skipped)."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        """Check whether any post already uses this slug."""
        pass

    @abstractmethod
    async def next_id(self) -> PostId:
        """Return the highest existing post id + 1 (1 for an empty store)."""
        pass

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Insert a new post document."""
        pass

    @abstractmethod
    async def replace(self, post: Post) -> Post:
        """Replace the whole post document.

        Used for edits to the post body and to its embedded comments.
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post document.

        Returns:
            True if a document was deleted
        """
        pass

    @abstractmethod
    async def set_status(self, post_id: PostId, status: PostStatus) -> None:
        """Set the lifecycle status of a post."""
        pass

    @abstractmethod
    async def add_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        """Add the account to the reaction list and increment the counter.

        Applied only if the account is not already a member, so the list
        and the counter change together or not at all.

        Returns:
            True if the post was modified
        """
        pass

    @abstractmethod
    async def remove_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        """Remove the account from the reaction list and decrement the counter.

        Applied only if the account is currently a member.

        Returns:
            True if the post was modified
        """
        pass

    @abstractmethod
    async def add_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        """Add a reaction to one embedded comment (guarded like add_reaction)."""
        pass

    @abstractmethod
    async def remove_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        """Remove a reaction from one embedded comment (guarded)."""
        pass

    @abstractmethod
    async def add_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        """Add the account to the post's saved-by set."""
        pass

    @abstractmethod
    async def remove_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        """Remove the account from the post's saved-by set."""
        pass

    @abstractmethod
    async def find_published(self, limit: int, offset: int = 0) -> list[Post]:
        """Find published posts in feed order with pagination."""
        pass

    @abstractmethod
    async def find_all_published(self) -> list[Post]:
        """Find every published post in feed order."""
        pass

    @abstractmethod
    async def find_published_by_author(
        self, username: str, limit: Optional[int] = None
    ) -> list[Post]:
        """Find published posts of an author in feed order."""
        pass

    @abstractmethod
    async def find_by_author(self, username: str) -> list[Post]:
        """Find every post of an author, drafts included."""
        pass

    @abstractmethod
    async def find_published_by_tag(self, tag_value: str) -> list[Post]:
        """Find published posts carrying a tag value."""
        pass

    @abstractmethod
    async def search_published(self, keyword: str) -> list[Post]:
        """Find published posts whose title or content contains the keyword."""
        pass

    @abstractmethod
    async def search_by_comment_content(self, keyword: str) -> list[Post]:
        """Find published posts with a comment containing the keyword."""
        pass

    @abstractmethod
    async def find_by_comment_author(self, username: str) -> list[Post]:
        """Find posts holding at least one comment by the username."""
        pass

    @abstractmethod
    async def update_author_snapshot(
        self, username: str, name: Optional[str] = None, avatar: Optional[str] = None
    ) -> int:
        """Refresh the author snapshot on every post by the username.

        Returns:
            Number of posts modified
        """
        pass
