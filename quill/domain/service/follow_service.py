"""Follow domain service.

Follows are stored on the follower's side only. Neither the followed
account nor the tag keeps a reverse list.
"""

import logfire

from quill.domain.error import BadRequestError
from quill.domain.repository import AccountRepository
from quill.domain.value import AccountId, ToggleResult

from .account_service import AccountService
from .base import Service
from .tag_service import TagService


class FollowService(Service):
    """Domain service for following tags and accounts."""

    def __init__(
        self,
        account_repository: AccountRepository,
        account_service: AccountService,
        tag_service: TagService,
    ) -> None:
        """Initialize follow service.

        Args:
            account_repository: Account repository
            account_service: Account domain service
            tag_service: Tag domain service
        """
        self.account_repository = account_repository
        self.account_service = account_service
        self.tag_service = tag_service

    async def follow_tag_toggle(
        self, account_id: AccountId, tag_value: str
    ) -> ToggleResult:
        """Follow a tag, or unfollow it if already followed.

        Raises:
            NotFoundError: If the account or the tag doesn't exist
        """
        with logfire.span(
            "follow_service.follow_tag_toggle", account_id=account_id, tag=tag_value
        ):
            account = await self.account_service.get_account_by_id(account_id)
            tag = await self.tag_service.get_tag_by_value(tag_value)

            if tag.id in account.followed_tags:
                await self.account_repository.remove_followed_tag(account.id, tag.id)
                result = ToggleResult.REMOVED
            else:
                await self.account_repository.add_followed_tag(account.id, tag.id)
                result = ToggleResult.ADDED

            logfire.info("Tag follow toggled", tag=tag_value, result=result.value)
            return result

    async def follow_user_toggle(
        self, follower_id: AccountId, followee_username: str
    ) -> ToggleResult:
        """Follow an account, or unfollow it if already followed.

        Raises:
            NotFoundError: If either account doesn't exist
            BadRequestError: If an account tries to follow itself
        """
        with logfire.span(
            "follow_service.follow_user_toggle",
            follower_id=follower_id,
            followee=followee_username,
        ):
            follower = await self.account_service.get_account_by_id(follower_id)
            followee = await self.account_service.get_account_by_username(
                followee_username
            )
            if follower.id == followee.id:
                raise BadRequestError("an account cannot follow itself")

            if followee.id in follower.followed_users:
                await self.account_repository.remove_followed_user(
                    follower.id, followee.id
                )
                result = ToggleResult.REMOVED
            else:
                await self.account_repository.add_followed_user(follower.id, followee.id)
                result = ToggleResult.ADDED

            logfire.info(
                "User follow toggled", followee=followee_username, result=result.value
            )
            return result
