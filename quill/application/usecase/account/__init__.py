"""Account use cases."""

from .get_dashboard import (
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
)
from .get_user_profile import (
    CommentActivity,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ProfileSummary,
)
from .list_accounts import (
    AccountAdminRow,
    ListAccountsRequest,
    ListAccountsResponse,
    ListAccountsUseCase,
)
from .register_account import (
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
)
from .set_account_status import (
    SetAccountStatusRequest,
    SetAccountStatusResponse,
    SetAccountStatusUseCase,
)
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "AccountAdminRow",
    "CommentActivity",
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListAccountsRequest",
    "ListAccountsResponse",
    "ListAccountsUseCase",
    "ProfileSummary",
    "RegisterAccountRequest",
    "RegisterAccountResponse",
    "RegisterAccountUseCase",
    "SetAccountStatusRequest",
    "SetAccountStatusResponse",
    "SetAccountStatusUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
