"""List all posts use case (admin)."""

from pydantic import BaseModel

from quill.application.view import PostSummary, post_summary
from quill.domain.service import AccountService, PostService
from quill.domain.value import AccountId


class ListAllPostsRequest(BaseModel):
    """List all posts request."""

    admin_id: int


class ListAllPostsResponse(BaseModel):
    """List all posts response."""

    posts: list[PostSummary]
    total: int


class ListAllPostsUseCase:
    """Use case for the admin listing of every published post."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: ListAllPostsRequest) -> ListAllPostsResponse:
        """Execute list all posts flow.

        Raises:
            UnauthorizedError: If the actor isn't an admin
        """
        admin = await self.account_service.require_admin(AccountId(request.admin_id))
        posts = await self.post_service.list_all_published()
        return ListAllPostsResponse(
            posts=[post_summary(p, admin) for p in posts], total=len(posts)
        )
