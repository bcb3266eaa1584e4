"""Delete post use case."""

from pydantic import BaseModel

from quill.domain.service import PostService
from quill.domain.value import AccountId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str
    author_id: int


class DeletePostResponse(BaseModel):
    """Delete post response."""

    id: int
    slug: str
    deleted: bool = True


class DeletePostUseCase:
    """Use case for deleting a post with its tag and reading list cascade."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotOwnedError: If the actor isn't the author
        """
        post = await self.post_service.delete_post(
            AccountId(request.author_id), request.slug
        )
        return DeletePostResponse(id=post.id, slug=post.slug)
