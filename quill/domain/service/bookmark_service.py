"""Bookmark (save) domain service.

A save is recorded twice: the account id in ``Post.saved_by`` and the post
id in ``Account.reading_list``. The two writes are separate store calls
with no rollback. The post side is written first; a failure before the
account side leaves the pair inconsistent until the next toggle, which
repairs it because both writes are set-based.
"""

import logfire

from quill.domain.repository import AccountRepository, PostRepository
from quill.domain.value import AccountId, ToggleResult

from .account_service import AccountService
from .base import Service
from .post_service import PostService


class BookmarkService(Service):
    """Domain service keeping saved-by and reading lists in step."""

    def __init__(
        self,
        post_repository: PostRepository,
        account_repository: AccountRepository,
        post_service: PostService,
        account_service: AccountService,
    ) -> None:
        """Initialize bookmark service.

        Args:
            post_repository: Post repository
            account_repository: Account repository
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_repository = post_repository
        self.account_repository = account_repository
        self.post_service = post_service
        self.account_service = account_service

    async def toggle_save(self, account_id: AccountId, slug: str) -> ToggleResult:
        """Save or unsave a post for an account.

        Membership is read from the post's saved-by list.

        Args:
            account_id: Account ID
            slug: Post slug

        Returns:
            Which way the membership moved

        Raises:
            NotFoundError: If the post or the account doesn't exist
        """
        with logfire.span(
            "bookmark_service.toggle_save", account_id=account_id, slug=slug
        ):
            account = await self.account_service.get_account_by_id(account_id)
            post = await self.post_service.get_post_by_slug(slug)

            if account.id in post.saved_by:
                await self.post_repository.remove_saved_by(post.id, account.id)
                logfire.info("Save step: post side removed", post_id=post.id)
                await self.account_repository.remove_from_reading_list(
                    account.id, post.id
                )
                logfire.info("Save step: account side removed", account_id=account.id)
                return ToggleResult.REMOVED

            await self.post_repository.add_saved_by(post.id, account.id)
            logfire.info("Save step: post side added", post_id=post.id)
            await self.account_repository.add_to_reading_list(account.id, post.id)
            logfire.info("Save step: account side added", account_id=account.id)
            return ToggleResult.ADDED
