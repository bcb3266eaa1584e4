"""Get user profile use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quill.application.view import (
    CommentView,
    PostSummary,
    ProfileCard,
    comment_view,
    post_summary,
    profile_card,
)
from quill.domain.service import AccountService, CommentService, PostService


class CommentActivity(BaseModel):
    """A comment by the profile owner, with where it was posted."""

    post_slug: str
    post_title: str
    comment: CommentView
    parent: Optional[CommentView] = None


class ProfileSummary(BaseModel):
    """Activity counters for a profile."""

    followed_tag_count: int
    comment_count: int
    post_count: int


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str
    viewer_id: Optional[int] = None


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    profile: ProfileCard
    recent_comments: list[CommentActivity]
    recent_posts: list[PostSummary]
    summary: ProfileSummary


class GetUserProfileUseCase:
    """Use case for assembling an account's public profile page."""

    def __init__(
        self,
        account_service: AccountService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            account_service: Account domain service
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.account_service = account_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Comments are resolved with the viewer's reaction flags. Posts and
        the post count cover published posts only.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        with logfire.span("get_user_profile.execute", username=request.username):
            viewer = await self.account_service.find_account(request.viewer_id)
            account = await self.account_service.get_account_by_username(
                request.username
            )
            authored = await self.comment_service.search_comments_by_author(
                account.username
            )
            posts = await self.post_service.list_by_author(account.username)

            comments = [
                CommentActivity(
                    post_slug=a.post.slug,
                    post_title=a.post.title,
                    comment=comment_view(a.comment, viewer),
                    parent=comment_view(a.parent, viewer) if a.parent else None,
                )
                for a in authored
            ]

            return GetUserProfileResponse(
                profile=profile_card(account, viewer),
                recent_comments=comments,
                recent_posts=[post_summary(p, viewer) for p in posts],
                summary=ProfileSummary(
                    followed_tag_count=len(account.followed_tags),
                    comment_count=len(comments),
                    post_count=len(posts),
                ),
            )
