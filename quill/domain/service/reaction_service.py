"""Reaction domain service.

Post reactions and comment reactions share one toggle shape: membership
in the reactor list decides the direction, and the counter moves in the
same guarded single-document update.
"""

import logfire

from quill.domain.error import BadRequestError, NotFoundError
from quill.domain.model import Post
from quill.domain.repository import PostRepository
from quill.domain.value import AccountId, CommentId, ToggleResult

from .base import Service
from .post_service import PostService


class ReactionService(Service):
    """Domain service for reactions on posts and comments."""

    def __init__(
        self, post_repository: PostRepository, post_service: PostService
    ) -> None:
        """Initialize reaction service.

        Args:
            post_repository: Post repository
            post_service: Post domain service
        """
        self.post_repository = post_repository
        self.post_service = post_service

    async def _get_reactable_post(self, slug: str) -> Post:
        post = await self.post_service.get_post_by_slug(slug)
        if not post.is_published:
            logfire.warn("Reaction on draft post", slug=slug)
            raise BadRequestError(f"cannot react to draft post {slug}")
        return post

    async def toggle_post_reaction(
        self, slug: str, account_id: AccountId
    ) -> ToggleResult:
        """Add or remove the account's reaction to a post.

        Returns:
            Which way the membership moved

        Raises:
            NotFoundError: If the post doesn't exist
            BadRequestError: If the post is a draft
        """
        with logfire.span(
            "reaction_service.toggle_post_reaction", slug=slug, account_id=account_id
        ):
            post = await self._get_reactable_post(slug)

            if account_id in post.reaction_members:
                applied = await self.post_repository.remove_reaction(post.id, account_id)
                result = ToggleResult.REMOVED
            else:
                applied = await self.post_repository.add_reaction(post.id, account_id)
                result = ToggleResult.ADDED

            if not applied:
                logfire.warn(
                    "Reaction already in target state", slug=slug, result=result.value
                )
            logfire.info("Post reaction toggled", slug=slug, result=result.value)
            return result

    async def remove_post_reaction(self, slug: str, account_id: AccountId) -> None:
        """Remove the account's reaction to a post.

        Raises:
            BadRequestError: If the post is a draft or the account never reacted
        """
        with logfire.span(
            "reaction_service.remove_post_reaction", slug=slug, account_id=account_id
        ):
            post = await self._get_reactable_post(slug)
            if account_id not in post.reaction_members:
                raise BadRequestError("no reaction to remove")
            await self.post_repository.remove_reaction(post.id, account_id)
            logfire.info("Post reaction removed", slug=slug)

    async def toggle_comment_reaction(
        self, slug: str, comment_id: CommentId, account_id: AccountId
    ) -> ToggleResult:
        """Add or remove the account's reaction to a comment.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            BadRequestError: If the post is a draft
        """
        with logfire.span(
            "reaction_service.toggle_comment_reaction",
            slug=slug,
            comment_id=comment_id,
            account_id=account_id,
        ):
            post = await self._get_reactable_post(slug)
            comment = post.find_comment(comment_id)
            if comment is None:
                raise NotFoundError("comment", comment_id)

            if comment.has_interacted(account_id):
                await self.post_repository.remove_comment_reaction(
                    post.id, comment_id, account_id
                )
                result = ToggleResult.REMOVED
            else:
                await self.post_repository.add_comment_reaction(
                    post.id, comment_id, account_id
                )
                result = ToggleResult.ADDED

            logfire.info(
                "Comment reaction toggled",
                slug=slug,
                comment_id=comment_id,
                result=result.value,
            )
            return result

    async def remove_comment_reaction(
        self, slug: str, comment_id: CommentId, account_id: AccountId
    ) -> None:
        """Remove the account's reaction to a comment.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            BadRequestError: If the post is a draft or the account never reacted
        """
        with logfire.span(
            "reaction_service.remove_comment_reaction",
            slug=slug,
            comment_id=comment_id,
        ):
            post = await self._get_reactable_post(slug)
            comment = post.find_comment(comment_id)
            if comment is None:
                raise NotFoundError("comment", comment_id)
            if not comment.has_interacted(account_id):
                raise BadRequestError("no reaction to remove")
            await self.post_repository.remove_comment_reaction(
                post.id, comment_id, account_id
            )
