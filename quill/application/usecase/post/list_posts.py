"""List posts use case (feed index)."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from quill.application.view import PostSummary, post_summary
from quill.domain.service import AccountService, PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=0, ge=0)
    viewer_id: Optional[int] = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostSummary]
    page: int


class ListPostsUseCase:
    """Use case for the paginated feed of published posts."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Page number (0 and 1 are the first page) and viewer

        Returns:
            One page of published posts, each with the viewer's save flag
        """
        with logfire.span("list_posts.execute", page=request.page):
            viewer = await self.account_service.find_account(request.viewer_id)
            posts = await self.post_service.list_feed(request.page)
            return ListPostsResponse(
                posts=[post_summary(p, viewer) for p in posts],
                page=request.page,
            )
