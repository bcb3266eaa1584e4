"""Remove reaction use case."""

from typing import Optional

from pydantic import BaseModel, model_validator

from quill.domain.service import ReactionService
from quill.domain.value import AccountId, CommentId, ReactionTarget


class RemoveReactionRequest(BaseModel):
    """Remove reaction request."""

    slug: str
    account_id: int
    target: ReactionTarget = ReactionTarget.POST
    comment_id: Optional[int] = None

    @model_validator(mode="after")
    def check_comment_target(self) -> "RemoveReactionRequest":
        if self.target == ReactionTarget.COMMENT and self.comment_id is None:
            raise ValueError("comment_id is required for comment reactions")
        return self


class RemoveReactionResponse(BaseModel):
    """Remove reaction response."""

    removed: bool = True


class RemoveReactionUseCase:
    """Use case for withdrawing a reaction explicitly."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> RemoveReactionResponse:
        """Execute remove reaction flow.

        Raises:
            BadRequestError: If there is no reaction to remove
        """
        account_id = AccountId(request.account_id)
        if request.target == ReactionTarget.COMMENT:
            await self.reaction_service.remove_comment_reaction(
                request.slug, CommentId(request.comment_id), account_id
            )
        else:
            await self.reaction_service.remove_post_reaction(request.slug, account_id)
        return RemoveReactionResponse()
