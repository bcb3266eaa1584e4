"""Update comment use case."""

from pydantic import BaseModel, Field

from quill.application.view import CommentView, comment_view
from quill.domain.service import AccountService, CommentService
from quill.domain.value import AccountId, CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    slug: str
    comment_id: int
    author_id: int
    content: str = Field(min_length=1)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentView


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self, comment_service: CommentService, account_service: AccountService
    ) -> None:
        self.comment_service = comment_service
        self.account_service = account_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            NotOwnedError: If the actor didn't write the comment
        """
        author_id = AccountId(request.author_id)
        comment_id = CommentId(request.comment_id)
        post = await self.comment_service.update_comment(
            post_slug=request.slug,
            comment_id=comment_id,
            author_id=author_id,
            content=request.content,
        )
        actor = await self.account_service.get_account_by_id(author_id)
        comment = post.find_comment(comment_id)
        return UpdateCommentResponse(comment=comment_view(comment, actor))
