"""User (account) routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from quill.application.usecase.account import (
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListAccountsRequest,
    ListAccountsResponse,
    ListAccountsUseCase,
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
    SetAccountStatusRequest,
    SetAccountStatusResponse,
    SetAccountStatusUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from quill.application.usecase.follow import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
)
from quill.domain.service import JWTService
from quill.domain.value import AccountStatus
from quill.interface.api.auth import optional_account_id, require_account_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    name: Optional[str] = Field(default=None, min_length=1)
    avatar: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = None
    private_email: Optional[str] = None


class SetAccountStatusAPIRequest(BaseModel):
    """API request for moderating an account."""

    status: AccountStatus


@router.post(
    "", response_model=RegisterAccountResponse, status_code=status.HTTP_201_CREATED
)
async def register_account(
    request: RegisterAccountRequest,
    use_case: FromDishka[RegisterAccountUseCase],
) -> RegisterAccountResponse:
    """Register an account.

    Called by the credential service, which hashes the password.
    """
    return await use_case.execute(request)


@router.get("", response_model=ListAccountsResponse)
async def list_accounts(
    use_case: FromDishka[ListAccountsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListAccountsResponse:
    """Every account with moderation fields (admin only)."""
    admin_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(ListAccountsRequest(admin_id=admin_id))


@router.get("/me/dashboard", response_model=GetDashboardResponse)
async def get_dashboard(
    use_case: FromDishka[GetDashboardUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetDashboardResponse:
    """The caller's posts, follows and reading list."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(GetDashboardRequest(account_id=account_id))


@router.patch("/me", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Edit the caller's profile."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        UpdateProfileRequest(
            account_id=account_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetUserProfileResponse:
    """Public profile page."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(
        GetUserProfileRequest(username=username, viewer_id=viewer_id)
    )


@router.post("/{username}/follow", response_model=FollowUserResponse)
async def follow_user(
    username: str,
    use_case: FromDishka[FollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Follow the account, or unfollow it if already followed."""
    follower_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        FollowUserRequest(follower_id=follower_id, username=username)
    )


@router.put("/{username}/status", response_model=SetAccountStatusResponse)
async def set_account_status(
    username: str,
    request: SetAccountStatusAPIRequest,
    use_case: FromDishka[SetAccountStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SetAccountStatusResponse:
    """Activate, ban or reset an account (admin only)."""
    admin_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        SetAccountStatusRequest(
            admin_id=admin_id, username=username, status=request.status
        )
    )
