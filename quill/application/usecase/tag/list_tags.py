"""List tags use case."""

from typing import Optional

from pydantic import BaseModel

from quill.application.view import TagView, tag_view
from quill.domain.service import AccountService, TagService
from quill.domain.value import TagType


class ListTagsRequest(BaseModel):
    """List tags request."""

    tag_type: Optional[TagType] = TagType.TAG  # None lists every type
    viewer_id: Optional[int] = None


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagView]


class ListTagsUseCase:
    """Use case for listing tags with the viewer's follow flags."""

    def __init__(self, tag_service: TagService, account_service: AccountService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            account_service: Account domain service
        """
        self.tag_service = tag_service
        self.account_service = account_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        viewer = await self.account_service.find_account(request.viewer_id)
        tags = await self.tag_service.list_tags(request.tag_type)
        return ListTagsResponse(tags=[tag_view(t, viewer) for t in tags])
