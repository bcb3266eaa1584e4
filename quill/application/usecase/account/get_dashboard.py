"""Get dashboard use case."""

import logfire
from pydantic import BaseModel

from quill.application.view import (
    PostSummary,
    ProfileCard,
    TagView,
    post_summary,
    profile_card,
    tag_view,
)
from quill.domain.service import AccountService, PostService, TagService
from quill.domain.value import AccountId


class GetDashboardRequest(BaseModel):
    """Get dashboard request."""

    account_id: int


class GetDashboardResponse(BaseModel):
    """Get dashboard response."""

    posts: list[PostSummary]
    followed_tags: list[TagView]
    followed_users: list[ProfileCard]
    reading_list: list[PostSummary]


class GetDashboardUseCase:
    """Use case for the signed-in account's dashboard.

    Joins the account's own posts (drafts included), the tags and accounts
    it follows, and its reading list.
    """

    def __init__(
        self,
        account_service: AccountService,
        post_service: PostService,
        tag_service: TagService,
    ) -> None:
        self.account_service = account_service
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        with logfire.span("get_dashboard.execute", account_id=request.account_id):
            account = await self.account_service.get_account_by_id(
                AccountId(request.account_id)
            )
            posts = await self.post_service.list_by_author(
                account.username, include_drafts=True
            )
            tags = await self.tag_service.get_tags_by_ids(account.followed_tags)
            followed = await self.account_service.get_accounts(account.followed_users)
            saved = await self.post_service.get_posts_by_ids(account.reading_list)

            return GetDashboardResponse(
                posts=[post_summary(p, account) for p in posts],
                followed_tags=[tag_view(t, account) for t in tags],
                followed_users=[profile_card(a, account) for a in followed],
                reading_list=[post_summary(p, account) for p in saved],
            )
