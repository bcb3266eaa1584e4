"""Post routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from quill.application.usecase.bookmark import (
    ToggleSaveRequest,
    ToggleSaveResponse,
    ToggleSaveUseCase,
)
from quill.application.usecase.post import (
    ChangePostStatusRequest,
    ChangePostStatusResponse,
    ChangePostStatusUseCase,
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListAllPostsRequest,
    ListAllPostsResponse,
    ListAllPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from quill.application.usecase.reaction import (
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from quill.domain.service import JWTService
from quill.domain.value import PostStatus, ReactionTarget
from quill.interface.api.auth import optional_account_id, require_account_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1)
    content: str = ""
    banner: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.PUBLISHED


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    banner: Optional[str] = None
    tags: Optional[list[str]] = None
    status: Optional[PostStatus] = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListPostsResponse:
    """Feed of published posts, 15 per page."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(ListPostsRequest(page=page, viewer_id=viewer_id))


@router.get("/all", response_model=ListAllPostsResponse)
async def list_all_posts(
    use_case: FromDishka[ListAllPostsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListAllPostsResponse:
    """Every published post (admin only)."""
    admin_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(ListAllPostsRequest(admin_id=admin_id))


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication.
    """
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        CreatePostRequest(author_id=author_id, **request.model_dump())
    )


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetPostResponse:
    """Post detail page."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(GetPostRequest(slug=slug, viewer_id=viewer_id))


@router.patch("/{slug}", response_model=UpdatePostResponse)
async def update_post(
    slug: str,
    request: UpdatePostAPIRequest,
    use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdatePostResponse:
    """Edit a post. Only the author may edit."""
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        UpdatePostRequest(
            slug=slug, author_id=author_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.post("/{slug}/status", response_model=ChangePostStatusResponse)
async def change_post_status(
    slug: str,
    use_case: FromDishka[ChangePostStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ChangePostStatusResponse:
    """Flip a post between Draft and Published."""
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        ChangePostStatusRequest(slug=slug, author_id=author_id)
    )


@router.delete("/{slug}", response_model=DeletePostResponse)
async def delete_post(
    slug: str,
    use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post with its tag and reading list cascade."""
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(DeletePostRequest(slug=slug, author_id=author_id))


@router.post("/{slug}/reactions", response_model=ToggleReactionResponse)
async def toggle_post_reaction(
    slug: str,
    use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleReactionResponse:
    """React to a post, or withdraw the reaction if present."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        ToggleReactionRequest(
            slug=slug, account_id=account_id, target=ReactionTarget.POST
        )
    )


@router.delete("/{slug}/reactions", response_model=RemoveReactionResponse)
async def remove_post_reaction(
    slug: str,
    use_case: FromDishka[RemoveReactionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> RemoveReactionResponse:
    """Withdraw a reaction; 400 if there is none."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        RemoveReactionRequest(slug=slug, account_id=account_id)
    )


@router.post("/{slug}/save", response_model=ToggleSaveResponse)
async def toggle_save(
    slug: str,
    use_case: FromDishka[ToggleSaveUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleSaveResponse:
    """Add the post to the caller's reading list, or remove it."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(ToggleSaveRequest(slug=slug, account_id=account_id))
