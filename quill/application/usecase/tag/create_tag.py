"""Create tag use case (admin)."""

from pydantic import BaseModel, Field

from quill.application.view import TagView, tag_view
from quill.domain.service import AccountService, TagService
from quill.domain.value import AccountId, TagType


class CreateTagRequest(BaseModel):
    """Create tag request."""

    admin_id: int
    value: str = Field(min_length=1, max_length=64)
    description: str = ""
    color: str = ""
    image: str = ""
    type: TagType = TagType.TAG


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag: TagView


class CreateTagUseCase:
    """Use case for creating a tag."""

    def __init__(self, tag_service: TagService, account_service: AccountService) -> None:
        self.tag_service = tag_service
        self.account_service = account_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Raises:
            UnauthorizedError: If the actor isn't an admin
            DuplicateError: If the value is taken
        """
        admin = await self.account_service.require_admin(AccountId(request.admin_id))
        tag = await self.tag_service.create_tag(
            value=request.value,
            description=request.description,
            color=request.color,
            image=request.image,
            tag_type=request.type,
        )
        return CreateTagResponse(tag=tag_view(tag, admin))
