"""Toggle save (bookmark) use case."""

from pydantic import BaseModel

from quill.domain.service import BookmarkService
from quill.domain.value import AccountId, ToggleResult


class ToggleSaveRequest(BaseModel):
    """Toggle save request."""

    slug: str
    account_id: int


class ToggleSaveResponse(BaseModel):
    """Toggle save response."""

    result: ToggleResult
    saved: bool


class ToggleSaveUseCase:
    """Use case for adding a post to, or removing it from, a reading list."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: ToggleSaveRequest) -> ToggleSaveResponse:
        result = await self.bookmark_service.toggle_save(
            AccountId(request.account_id), request.slug
        )
        return ToggleSaveResponse(result=result, saved=result == ToggleResult.ADDED)
