"""Comment domain service.

Comments live inside their post document. Every change loads the post,
rebuilds the comment list in memory and replaces the whole document, so
concurrent writers to the same post can overwrite each other.
"""

from datetime import datetime
from typing import Optional

import logfire

from quill.config import ContentSettings
from quill.domain.error import (
    BadRequestError,
    NotFoundError,
    NotOwnedError,
    ParentCommentNotFoundError,
)
from quill.domain.model import TOP_LEVEL, Comment, Post
from quill.domain.model.common import DomainModel
from quill.domain.repository import PostRepository
from quill.domain.value import AccountId, CommentId

from .account_service import AccountService
from .base import Service


class AuthoredComment(DomainModel):
    """A comment located by author, with the post and parent it hangs off."""

    post: Post
    comment: Comment
    parent: Optional[Comment] = None


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        account_service: AccountService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            post_repository: Post repository
            account_service: Account domain service
            content_settings: Content settings
        """
        self.post_repository = post_repository
        self.account_service = account_service
        self.content_settings = content_settings

    def _check_content(self, content: str) -> str:
        content = content.strip()
        if not content:
            raise BadRequestError("comment must not be empty")
        if len(content) > self.content_settings.max_comment_length:
            raise BadRequestError("comment is too long")
        return content

    async def _get_post(self, slug: str) -> Post:
        post = await self.post_repository.find_by_slug(slug)
        if post is None:
            raise NotFoundError("post", slug)
        return post

    async def add_comment(
        self,
        post_slug: str,
        author_id: AccountId,
        content: str,
        parent_id: CommentId = TOP_LEVEL,
    ) -> Post:
        """Append a comment to a post.

        Args:
            post_slug: Slug of the post
            author_id: Commenting account ID
            content: Comment text
            parent_id: 0 for a top-level comment, else the id of a comment
                in the same post

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post or the author doesn't exist
            ParentCommentNotFoundError: If parent_id doesn't resolve in the post
            BadRequestError: If the content is empty or too long
        """
        with logfire.span(
            "comment_service.add_comment",
            slug=post_slug,
            author_id=author_id,
            parent_id=parent_id,
        ):
            author = await self.account_service.get_account_by_id(author_id)
            post = await self._get_post(post_slug)
            content = self._check_content(content)

            if parent_id != TOP_LEVEL and post.find_comment(parent_id) is None:
                logfire.warn(
                    "Reply to unknown comment", slug=post_slug, parent_id=parent_id
                )
                raise ParentCommentNotFoundError(post_slug, parent_id)

            now = datetime.now()
            comment = Comment(
                id=post.next_comment_id(),
                content=content,
                author=author.snapshot(),
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )
            comments = [*post.comments, comment]
            commenters = post.commenters
            if author.id not in commenters:
                commenters = [*commenters, author.id]

            saved = await self.post_repository.replace(
                post.model_copy(
                    update={
                        "comments": comments,
                        "comment_count": len(comments),
                        "commenters": commenters,
                    }
                )
            )
            logfire.info("Comment added", slug=post_slug, comment_id=comment.id)
            return saved

    async def update_comment(
        self,
        post_slug: str,
        comment_id: CommentId,
        author_id: AccountId,
        content: str,
    ) -> Post:
        """Edit a comment's content (author only).

        Raises:
            NotFoundError: If the post, the comment or the actor doesn't exist
            NotOwnedError: If the actor didn't write the comment
        """
        with logfire.span(
            "comment_service.update_comment",
            slug=post_slug,
            comment_id=comment_id,
            author_id=author_id,
        ):
            actor = await self.account_service.get_account_by_id(author_id)
            post = await self._get_post(post_slug)
            comment = post.find_comment(comment_id)
            if comment is None:
                raise NotFoundError("comment", comment_id)
            if comment.author.username != actor.username:
                logfire.warn(
                    "Comment edit by non-owner",
                    comment_id=comment_id,
                    actor=actor.username,
                )
                raise NotOwnedError("comment", comment_id, actor.username)

            edited = comment.edited(content=self._check_content(content))
            comments = [edited if c.id == comment_id else c for c in post.comments]
            saved = await self.post_repository.replace(
                post.model_copy(update={"comments": comments})
            )
            logfire.info("Comment updated", slug=post_slug, comment_id=comment_id)
            return saved

    async def search_comments_by_author(self, username: str) -> list[AuthoredComment]:
        """Every comment written by a username, newest first.

        Each entry carries its post and, for replies, the parent comment.
        """
        with logfire.span(
            "comment_service.search_comments_by_author", username=username
        ):
            found: list[AuthoredComment] = []
            for post in await self.post_repository.find_by_comment_author(username):
                for comment in post.comments:
                    if comment.author.username != username:
                        continue
                    parent = None
                    if comment.is_reply:
                        parent = post.find_comment(comment.parent_id)
                    found.append(
                        AuthoredComment(post=post, comment=comment, parent=parent)
                    )
            found.sort(key=lambda a: a.comment.created_at, reverse=True)
            return found
