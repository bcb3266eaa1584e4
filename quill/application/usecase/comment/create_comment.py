"""Create comment use case."""

from pydantic import BaseModel, Field

from quill.application.view import PostDetail, post_detail
from quill.domain.service import AccountService, CommentService
from quill.domain.value import AccountId, CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    slug: str
    author_id: int  # From the authenticated account
    content: str = Field(min_length=1)
    parent_id: int = Field(default=0, ge=0)  # 0 for a top-level comment


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post: PostDetail


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        account_service: AccountService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            account_service: Account domain service
        """
        self.comment_service = comment_service
        self.account_service = account_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The new comment id and the refreshed post

        Raises:
            NotFoundError: If the post doesn't exist
            ParentCommentNotFoundError: If parent_id doesn't resolve in the post
        """
        author_id = AccountId(request.author_id)
        post = await self.comment_service.add_comment(
            post_slug=request.slug,
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(request.parent_id),
        )
        author = await self.account_service.get_account_by_id(author_id)
        return CreateCommentResponse(
            comment_id=max(c.id for c in post.comments),
            post=post_detail(post, author),
        )
