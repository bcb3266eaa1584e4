"""Update tag use case (admin)."""

from typing import Optional

from pydantic import BaseModel

from quill.application.view import TagView, tag_view
from quill.domain.service import AccountService, TagService
from quill.domain.value import AccountId, TagId


class UpdateTagRequest(BaseModel):
    """Update tag request. The tag value itself cannot be changed."""

    admin_id: int
    tag_id: int
    description: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None


class UpdateTagResponse(BaseModel):
    """Update tag response."""

    tag: TagView


class UpdateTagUseCase:
    """Use case for editing a tag's presentation fields."""

    def __init__(self, tag_service: TagService, account_service: AccountService) -> None:
        self.tag_service = tag_service
        self.account_service = account_service

    async def execute(self, request: UpdateTagRequest) -> UpdateTagResponse:
        admin = await self.account_service.require_admin(AccountId(request.admin_id))
        tag = await self.tag_service.update_tag(
            TagId(request.tag_id),
            description=request.description,
            color=request.color,
            image=request.image,
        )
        return UpdateTagResponse(tag=tag_view(tag, admin))
