"""Follow tag use case."""

from pydantic import BaseModel

from quill.domain.service import FollowService
from quill.domain.value import AccountId, ToggleResult


class FollowTagRequest(BaseModel):
    """Follow tag request."""

    account_id: int
    tag_value: str


class FollowTagResponse(BaseModel):
    """Follow tag response."""

    tag_value: str
    result: ToggleResult
    following: bool


class FollowTagUseCase:
    """Use case for following or unfollowing a tag."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowTagRequest) -> FollowTagResponse:
        """Execute follow tag flow.

        Raises:
            NotFoundError: If the tag doesn't exist
        """
        result = await self.follow_service.follow_tag_toggle(
            AccountId(request.account_id), request.tag_value
        )
        return FollowTagResponse(
            tag_value=request.tag_value,
            result=result,
            following=result == ToggleResult.ADDED,
        )
