"""Update post use case."""

from typing import Optional

from pydantic import BaseModel

from quill.application.view import PostDetail, post_detail
from quill.domain.service import AccountService, PostService
from quill.domain.value import AccountId, PostStatus


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields are left unchanged."""

    slug: str
    author_id: int
    title: Optional[str] = None
    content: Optional[str] = None
    banner: Optional[str] = None
    tags: Optional[list[str]] = None
    status: Optional[PostStatus] = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostDetail


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post or a tag doesn't exist
            NotOwnedError: If the actor isn't the author
        """
        post = await self.post_service.update_post(
            author_id=AccountId(request.author_id),
            slug=request.slug,
            title=request.title,
            content=request.content,
            banner=request.banner,
            tags=request.tags,
            status=request.status,
        )
        actor = await self.account_service.get_account_by_id(
            AccountId(request.author_id)
        )
        return UpdatePostResponse(post=post_detail(post, actor))
