"""Update profile use case."""

from typing import Optional

from pydantic import BaseModel

from quill.application.view import ProfileCard, profile_card
from quill.domain.service import AccountService
from quill.domain.value import AccountId


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields are left unchanged."""

    account_id: int
    name: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    private_email: Optional[str] = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileCard


class UpdateProfileUseCase:
    """Use case for editing a profile.

    Name and avatar changes are copied into the author snapshot of every
    post by the account.
    """

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        account = await self.account_service.update_profile(
            AccountId(request.account_id),
            name=request.name,
            avatar=request.avatar,
            bio=request.bio,
            website=request.website,
            private_email=request.private_email,
        )
        return UpdateProfileResponse(profile=profile_card(account))
