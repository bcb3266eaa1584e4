"""Change post status use case."""

from pydantic import BaseModel

from quill.domain.service import PostService
from quill.domain.value import AccountId, PostStatus


class ChangePostStatusRequest(BaseModel):
    """Change post status request."""

    slug: str
    author_id: int


class ChangePostStatusResponse(BaseModel):
    """Change post status response."""

    slug: str
    status: PostStatus


class ChangePostStatusUseCase:
    """Use case for flipping a post between Draft and Published."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(
        self, request: ChangePostStatusRequest
    ) -> ChangePostStatusResponse:
        post = await self.post_service.change_status(
            AccountId(request.author_id), request.slug
        )
        return ChangePostStatusResponse(slug=post.slug, status=post.status)
