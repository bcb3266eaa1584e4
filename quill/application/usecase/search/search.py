"""Search use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from quill.application.view import PostSummary, ProfileCard, post_summary, profile_card
from quill.domain.error import BadRequestError
from quill.domain.service import AccountService, PostService


class SearchRequest(BaseModel):
    """Search request."""

    keyword: str = Field(min_length=1)
    viewer_id: Optional[int] = None


class SearchResponse(BaseModel):
    """Search response.

    The three result lists come from independent queries.
    """

    posts: list[PostSummary]
    comment_posts: list[PostSummary]
    accounts: list[ProfileCard]


class SearchUseCase:
    """Use case for keyword search over posts, comments and usernames."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        """Initialize search use case.

        Args:
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """Execute search flow.

        Args:
            request: Keyword and optional viewer

        Returns:
            Published posts matching title or body, published posts with a
            matching comment, and accounts whose username matches
        """
        keyword = request.keyword.strip()
        if not keyword:
            raise BadRequestError("search keyword must not be blank")
        with logfire.span("search.execute", keyword=keyword):
            viewer = await self.account_service.find_account(request.viewer_id)
            posts = await self.post_service.search_posts(keyword)
            comment_posts = await self.post_service.search_by_comment(keyword)
            accounts = await self.account_service.search_accounts(keyword)

            return SearchResponse(
                posts=[post_summary(p, viewer) for p in posts],
                comment_posts=[post_summary(p, viewer) for p in comment_posts],
                accounts=[profile_card(a, viewer) for a in accounts],
            )
