"""Register account use case."""

from typing import Optional

from pydantic import BaseModel, Field

from quill.application.view import ProfileCard, profile_card
from quill.domain.service import AccountService
from quill.domain.value import AccountStatus, TagId


class RegisterAccountRequest(BaseModel):
    """Register account request.

    The password arrives already hashed by the credential collaborator.
    """

    username: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1)
    password_hash: str
    school_email: str = ""
    private_email: str = ""
    avatar: Optional[str] = None
    followed_tags: list[int] = Field(default_factory=list)


class RegisterAccountResponse(BaseModel):
    """Register account response."""

    profile: ProfileCard
    status: AccountStatus


class RegisterAccountUseCase:
    """Use case for creating an account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: RegisterAccountRequest) -> RegisterAccountResponse:
        """Execute register account flow.

        Raises:
            DuplicateError: If the username is taken
        """
        account = await self.account_service.register_account(
            username=request.username,
            name=request.name,
            password_hash=request.password_hash,
            school_email=request.school_email,
            private_email=request.private_email,
            avatar=request.avatar,
            followed_tags=[TagId(t) for t in request.followed_tags],
        )
        return RegisterAccountResponse(
            profile=profile_card(account), status=account.status
        )
