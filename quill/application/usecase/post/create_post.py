"""Create post use case."""

from typing import Optional

from pydantic import BaseModel, Field

from quill.application.view import PostDetail, post_detail
from quill.domain.service import AccountService, PostService
from quill.domain.value import AccountId, PostStatus


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: int  # From the authenticated account
    title: str = Field(min_length=1)
    content: str = ""
    banner: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.PUBLISHED


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostDetail


class CreatePostUseCase:
    """Use case for publishing or drafting a new post."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The new post as seen by its author

        Raises:
            NotFoundError: If the author or a tag doesn't exist
            BadRequestError: If there are too many tags
        """
        post = await self.post_service.create_post(
            author_id=AccountId(request.author_id),
            title=request.title,
            content=request.content,
            banner=request.banner,
            tags=request.tags,
            status=request.status,
        )
        author = await self.account_service.get_account_by_id(
            AccountId(request.author_id)
        )
        return CreatePostResponse(post=post_detail(post, author))
