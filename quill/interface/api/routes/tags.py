"""Tag routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from quill.application.usecase.follow import (
    FollowTagRequest,
    FollowTagResponse,
    FollowTagUseCase,
)
from quill.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    GetTagRequest,
    GetTagResponse,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagResponse,
    UpdateTagUseCase,
)
from quill.domain.service import JWTService
from quill.domain.value import TagType
from quill.interface.api.auth import optional_account_id, require_account_id

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


class CreateTagAPIRequest(BaseModel):
    """API request for creating a tag."""

    value: str = Field(min_length=1, max_length=64)
    description: str = ""
    color: str = ""
    image: str = ""
    type: TagType = TagType.TAG


class UpdateTagAPIRequest(BaseModel):
    """API request for editing a tag."""

    description: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListTagsResponse:
    """Tags with the caller's follow flags."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(ListTagsRequest(viewer_id=viewer_id))


@router.post("", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagAPIRequest,
    use_case: FromDishka[CreateTagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateTagResponse:
    """Create a tag (admin only)."""
    admin_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        CreateTagRequest(admin_id=admin_id, **request.model_dump())
    )


@router.get("/{value}", response_model=GetTagResponse)
async def get_tag(
    value: str,
    use_case: FromDishka[GetTagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetTagResponse:
    """Tag page with moderators and published posts."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(GetTagRequest(value=value, viewer_id=viewer_id))


@router.patch("/{tag_id}", response_model=UpdateTagResponse)
async def update_tag(
    tag_id: int,
    request: UpdateTagAPIRequest,
    use_case: FromDishka[UpdateTagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateTagResponse:
    """Edit a tag's description, color or image (admin only)."""
    admin_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        UpdateTagRequest(admin_id=admin_id, tag_id=tag_id, **request.model_dump())
    )


@router.post("/{value}/follow", response_model=FollowTagResponse)
async def follow_tag(
    value: str,
    use_case: FromDishka[FollowTagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> FollowTagResponse:
    """Follow the tag, or unfollow it if already followed."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        FollowTagRequest(account_id=account_id, tag_value=value)
    )
