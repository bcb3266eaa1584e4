"""Get tag use case (tag page)."""

from typing import Optional

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


class GetTagRequest(BaseModel):
    """Get tag request."""

    value: str
    viewer_id: Optional[int] = None


class GetTagResponse(BaseModel):
    """Get tag response."""

    tag: TagView
    moderators: list[ProfileCard]
    posts: list[PostSummary]


class GetTagUseCase:
    """Use case for assembling a tag page."""

    def __init__(
        self,
        tag_service: TagService,
        post_service: PostService,
        account_service: AccountService,
    ) -> None:
        """Initialize get tag use case.

        Args:
            tag_service: Tag domain service
            post_service: Post domain service
            account_service: Account domain service
        """
        self.tag_service = tag_service
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        """Execute get tag flow.

        Returns:
            The tag with follow flag, its moderators, and its published posts

        Raises:
            NotFoundError: If the tag doesn't exist
        """
        with logfire.span("get_tag.execute", value=request.value):
            viewer = await self.account_service.find_account(request.viewer_id)
            tag = await self.tag_service.get_tag_by_value(request.value)
            moderators = await self.account_service.get_accounts(tag.moderators)
            posts = await self.post_service.list_by_tag(tag.value)

            return GetTagResponse(
                tag=tag_view(tag, viewer),
                moderators=[profile_card(m, viewer) for m in moderators],
                posts=[post_summary(p, viewer) for p in posts],
            )
