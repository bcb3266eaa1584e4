"""Get post use case (post detail page)."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.view import (
    PostDetail,
    PostSummary,
    ProfileCard,
    post_detail,
    post_summary,
    profile_card,
)
from quill.domain.service import AccountService, PostService


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str
    viewer_id: Optional[int] = None  # Current account ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostDetail
    author: ProfileCard
    more_posts: list[PostSummary]


class GetPostUseCase:
    """Use case for assembling the post detail page."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        The page joins the post, its author's profile with the viewer's
        follow flag, and other published posts by the same author.

        Args:
            request: Slug and optional viewer

        Returns:
            Post detail page

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("get_post.execute", slug=request.slug):
            viewer = await self.account_service.find_account(request.viewer_id)
            post = await self.post_service.get_post_by_slug(request.slug)
            author = await self.account_service.get_account_by_username(
                post.author.username
            )
            more = await self.post_service.more_by_author(
                post.author.username, exclude_slug=post.slug
            )

            return GetPostResponse(
                post=post_detail(post, viewer),
                author=profile_card(author, viewer),
                more_posts=[post_summary(p, viewer) for p in more],
            )
