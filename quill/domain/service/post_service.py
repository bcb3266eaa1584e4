"""Post domain service.

Owns the slug generator and the post lifecycle, including the cascades
into tags and reading lists. Cascades are sequential single-document
writes with no rollback.
"""

import re
import secrets
import string
import unicodedata
from datetime import datetime
from typing import Optional

import logfire

from quill.config import ContentSettings
from quill.domain.error import BadRequestError, NotFoundError, NotOwnedError
from quill.domain.model import Account, Post
from quill.domain.repository import AccountRepository, PostRepository
from quill.domain.value import AccountId, PostId, PostStatus

from .account_service import AccountService
from .base import Service
from .tag_service import TagService

SLUG_ALPHABET = string.ascii_letters + string.digits


def slugify(text: str) -> str:
    """Normalize text to lowercase ASCII words joined by hyphens."""
    ascii_text = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")


def random_suffix(length: int) -> str:
    """Random alphanumeric string."""
    return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(length))


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        account_repository: AccountRepository,
        account_service: AccountService,
        tag_service: TagService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            account_repository: Account repository, for reading list cleanup
            account_service: Account domain service
            tag_service: Tag domain service (usage counter)
            content_settings: Content settings
        """
        self.post_repository = post_repository
        self.account_repository = account_repository
        self.account_service = account_service
        self.tag_service = tag_service
        self.content_settings = content_settings

    async def generate_slug(self, title: str, username: str) -> str:
        """Generate a slug that is unused at the time of the check.

        The slug is the normalized title, the username and a random suffix.
        On a hit another suffix is appended to the same string and the
        lookup repeats. Uniqueness is probabilistic; the unique index on
        the collection is the final guard.

        Args:
            title: Post title
            username: Author username

        Returns:
            An unused slug
        """
        length = self.content_settings.slug_suffix_length
        slug = slugify(title) + username + random_suffix(length)
        while await self.post_repository.slug_exists(slug):
            logfire.warn("Slug collision, extending", slug=slug)
            slug += random_suffix(length)
        return slug

    async def get_post_by_slug(self, slug: str) -> Post:
        """Get a post by slug.

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("post_service.get_post_by_slug", slug=slug):
            post = await self.post_repository.find_by_slug(slug)
            if post is None:
                raise NotFoundError("post", slug)
            return post

    async def get_owned_post(self, slug: str, actor: Account) -> Post:
        """Get a post and check the actor owns it.

        Raises:
            NotFoundError: If no post has this slug
            NotOwnedError: If the actor isn't the author
        """
        post = await self.get_post_by_slug(slug)
        if not post.is_owned_by(actor.username):
            logfire.warn("Post edit by non-owner", slug=slug, actor=actor.username)
            raise NotOwnedError("post", slug, actor.username)
        return post

    def _check_tags(self, tags: list[str]) -> list[str]:
        unique = list(dict.fromkeys(tags))
        limit = self.content_settings.max_tags_per_post
        if len(unique) > limit:
            raise BadRequestError(f"a post can carry at most {limit} tags")
        return unique

    def _check_title(self, title: str) -> str:
        title = title.strip()
        if not title:
            raise BadRequestError("title must not be empty")
        if len(title) > self.content_settings.max_title_length:
            raise BadRequestError("title is too long")
        return title

    async def create_post(
        self,
        author_id: AccountId,
        title: str,
        content: str,
        banner: Optional[str] = None,
        tags: Optional[list[str]] = None,
        status: PostStatus = PostStatus.PUBLISHED,
    ) -> Post:
        """Create a post and count it against its tags.

        Every precondition runs before the first write. The post is
        inserted, then each tag's usage counter is incremented.

        Args:
            author_id: Author account ID
            title: Post title
            content: Post body
            banner: Optional banner image URL
            tags: Tag values (at most ``max_tags_per_post``)
            status: Initial status

        Returns:
            The created post

        Raises:
            NotFoundError: If the author or a tag doesn't exist
            BadRequestError: If title or tags are invalid
        """
        with logfire.span("post_service.create_post", author_id=author_id, title=title):
            author = await self.account_service.get_account_by_id(author_id)
            title = self._check_title(title)
            tag_values = self._check_tags(tags or [])
            await self.tag_service.resolve_tags(tag_values)

            now = datetime.now()
            post = Post(
                id=await self.post_repository.next_id(),
                slug=await self.generate_slug(title, author.username),
                author=author.snapshot(),
                title=title,
                content=content,
                banner=banner or None,
                status=status,
                tags=tag_values,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.insert(post)
            logfire.info("Post created", post_id=saved.id, slug=saved.slug)

            await self.tag_service.increment_usage(tag_values)
            return saved

    async def update_post(
        self,
        author_id: AccountId,
        slug: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        banner: Optional[str] = None,
        tags: Optional[list[str]] = None,
        status: Optional[PostStatus] = None,
    ) -> Post:
        """Edit a post (owner only).

        Tag usage counters are left untouched even when the tag set changes.

        Raises:
            NotFoundError: If the post, the actor or a tag doesn't exist
            NotOwnedError: If the actor isn't the author
            BadRequestError: If title or tags are invalid
        """
        with logfire.span("post_service.update_post", author_id=author_id, slug=slug):
            actor = await self.account_service.get_account_by_id(author_id)
            post = await self.get_owned_post(slug, actor)

            update: dict = {}
            if title is not None:
                update["title"] = self._check_title(title)
            if content is not None:
                update["content"] = content
            if banner is not None:
                update["banner"] = banner or None
            if tags is not None:
                tag_values = self._check_tags(tags)
                await self.tag_service.resolve_tags(tag_values)
                update["tags"] = tag_values
            if status is not None:
                update["status"] = status

            saved = await self.post_repository.replace(post.edited(**update))
            logfire.info("Post updated", post_id=post.id, slug=slug)
            return saved

    async def change_status(self, author_id: AccountId, slug: str) -> Post:
        """Flip a post between Draft and Published (owner only)."""
        with logfire.span("post_service.change_status", author_id=author_id, slug=slug):
            actor = await self.account_service.get_account_by_id(author_id)
            post = await self.get_owned_post(slug, actor)
            status = post.status.toggled()
            await self.post_repository.set_status(post.id, status)
            logfire.info("Post status changed", slug=slug, status=status.value)
            return post.model_copy(update={"status": status})

    async def delete_post(self, author_id: AccountId, slug: str) -> Post:
        """Delete a post (owner only) and cascade.

        Steps, in order: decrement tag usage, delete the document, pull
        the id from every reading list. Each step is logged so a partial
        cascade is visible in traces.

        Returns:
            The deleted post
        """
        with logfire.span("post_service.delete_post", author_id=author_id, slug=slug):
            actor = await self.account_service.get_account_by_id(author_id)
            post = await self.get_owned_post(slug, actor)

            await self.tag_service.decrement_usage(post.tags)
            logfire.info("Delete step: tag usage decremented", post_id=post.id)

            await self.post_repository.delete(post.id)
            logfire.info("Delete step: document removed", post_id=post.id)

            modified = await self.account_repository.remove_from_all_reading_lists(
                post.id
            )
            logfire.info(
                "Delete step: reading lists cleaned",
                post_id=post.id,
                accounts=modified,
            )
            return post

    async def list_feed(self, page: int) -> list[Post]:
        """Published posts for one feed page.

        Pages 0 and 1 both address the first page.
        """
        size = self.content_settings.feed_page_size
        offset = 0 if page <= 1 else (page - 1) * size
        with logfire.span("post_service.list_feed", page=page):
            return await self.post_repository.find_published(size, offset)

    async def list_all_published(self) -> list[Post]:
        """Every published post in feed order."""
        return await self.post_repository.find_all_published()

    async def more_by_author(self, username: str, exclude_slug: str) -> list[Post]:
        """Other published posts by the same author."""
        limit = self.content_settings.more_posts_limit
        posts = await self.post_repository.find_published_by_author(
            username, limit + 1
        )
        return [p for p in posts if p.slug != exclude_slug][:limit]

    async def list_by_author(
        self, username: str, include_drafts: bool = False
    ) -> list[Post]:
        """Posts by an author; drafts only when asked."""
        if include_drafts:
            return await self.post_repository.find_by_author(username)
        return await self.post_repository.find_published_by_author(username)

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Posts by id in feed order, skipping missing ones."""
        return await self.post_repository.find_by_ids(post_ids)

    async def list_by_tag(self, tag_value: str) -> list[Post]:
        """Published posts carrying a tag value."""
        return await self.post_repository.find_published_by_tag(tag_value)

    async def search_posts(self, keyword: str) -> list[Post]:
        """Published posts whose title or body contains the keyword."""
        return await self.post_repository.search_published(keyword)

    async def search_by_comment(self, keyword: str) -> list[Post]:
        """Published posts with a comment containing the keyword."""
        return await self.post_repository.search_by_comment_content(keyword)
