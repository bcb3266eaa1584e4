"""Toggle reaction use case."""

from typing import Optional

from pydantic import BaseModel, model_validator

from quill.domain.service import PostService, ReactionService
from quill.domain.value import AccountId, CommentId, ReactionTarget, ToggleResult


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request.

    ``comment_id`` is required when the target is a comment.
    """

    slug: str
    account_id: int
    target: ReactionTarget = ReactionTarget.POST
    comment_id: Optional[int] = None

    @model_validator(mode="after")
    def check_comment_target(self) -> "ToggleReactionRequest":
        if self.target == ReactionTarget.COMMENT and self.comment_id is None:
            raise ValueError("comment_id is required for comment reactions")
        return self


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    result: ToggleResult
    target: ReactionTarget
    reaction_count: int


class ToggleReactionUseCase:
    """Use case for reacting to a post or a comment."""

    def __init__(
        self, reaction_service: ReactionService, post_service: PostService
    ) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
            post_service: Post domain service
        """
        self.reaction_service = reaction_service
        self.post_service = post_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Returns:
            Direction of the toggle and the count after it

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            BadRequestError: If the post is a draft
        """
        account_id = AccountId(request.account_id)

        if request.target == ReactionTarget.COMMENT:
            comment_id = CommentId(request.comment_id)
            result = await self.reaction_service.toggle_comment_reaction(
                request.slug, comment_id, account_id
            )
            post = await self.post_service.get_post_by_slug(request.slug)
            count = post.find_comment(comment_id).interact_count
        else:
            result = await self.reaction_service.toggle_post_reaction(
                request.slug, account_id
            )
            post = await self.post_service.get_post_by_slug(request.slug)
            count = post.reaction_count

        return ToggleReactionResponse(
            result=result, target=request.target, reaction_count=count
        )
