"""Follow user use case."""

from pydantic import BaseModel

from quill.domain.service import FollowService
from quill.domain.value import AccountId, ToggleResult


class FollowUserRequest(BaseModel):
    """Follow user request."""

    follower_id: int
    username: str


class FollowUserResponse(BaseModel):
    """Follow user response."""

    username: str
    result: ToggleResult
    following: bool


class FollowUserUseCase:
    """Use case for following or unfollowing another account."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow user flow.

        Raises:
            NotFoundError: If the followed account doesn't exist
            BadRequestError: If the account targets itself
        """
        result = await self.follow_service.follow_user_toggle(
            AccountId(request.follower_id), request.username
        )
        return FollowUserResponse(
            username=request.username,
            result=result,
            following=result == ToggleResult.ADDED,
        )
