"""Set account status use case (admin)."""

from pydantic import BaseModel

from quill.domain.service import AccountService
from quill.domain.value import AccountId, AccountStatus


class SetAccountStatusRequest(BaseModel):
    """Set account status request."""

    admin_id: int
    username: str
    status: AccountStatus


class SetAccountStatusResponse(BaseModel):
    """Set account status response."""

    username: str
    status: AccountStatus


class SetAccountStatusUseCase:
    """Use case for activating, banning or resetting an account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(
        self, request: SetAccountStatusRequest
    ) -> SetAccountStatusResponse:
        """Execute set account status flow.

        Raises:
            UnauthorizedError: If the actor isn't an admin
            NotFoundError: If the account doesn't exist
        """
        account = await self.account_service.set_account_status(
            AccountId(request.admin_id), request.username, request.status
        )
        return SetAccountStatusResponse(
            username=account.username, status=account.status
        )
