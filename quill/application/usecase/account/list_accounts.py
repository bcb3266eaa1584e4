"""List accounts use case (admin)."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Account
from quill.domain.service import AccountService
from quill.domain.value import AccountId, AccountStatus


class AccountAdminRow(BaseModel):
    """Account as shown on the moderation page."""

    id: int
    username: str
    name: str
    school_email: str
    private_email: str
    avatar: str
    status: AccountStatus
    admin: bool
    last_access: datetime

    @classmethod
    def of(cls, account: Account) -> "AccountAdminRow":
        return cls(
            id=account.id,
            username=account.username,
            name=account.name,
            school_email=account.school_email,
            private_email=account.private_email,
            avatar=account.avatar,
            status=account.status,
            admin=account.admin,
            last_access=account.last_access,
        )


class ListAccountsRequest(BaseModel):
    """List accounts request."""

    admin_id: int


class ListAccountsResponse(BaseModel):
    """List accounts response."""

    accounts: list[AccountAdminRow]
    total: int


class ListAccountsUseCase:
    """Use case for the admin listing of every account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        """Execute list accounts flow.

        Raises:
            UnauthorizedError: If the actor isn't an admin
        """
        await self.account_service.require_admin(AccountId(request.admin_id))
        accounts = await self.account_service.list_accounts()
        return ListAccountsResponse(
            accounts=[AccountAdminRow.of(a) for a in accounts], total=len(accounts)
        )
