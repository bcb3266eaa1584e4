"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
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
from quill.domain.value import ReactionTarget
from quill.interface.api.auth import require_account_id

router = APIRouter(
    prefix="/posts/{slug}/comments", tags=["comments"], route_class=DishkaRoute
)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: int = Field(default=0, ge=0)  # 0 for top-level


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    slug: str,
    request: CreateCommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a post, or reply to one of its comments.

    Requires authentication.
    """
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        CreateCommentRequest(
            slug=slug,
            author_id=author_id,
            content=request.content,
            parent_id=request.parent_id,
        )
    )


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    slug: str,
    comment_id: int,
    request: UpdateCommentAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment. Only its author may edit."""
    author_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        UpdateCommentRequest(
            slug=slug,
            comment_id=comment_id,
            author_id=author_id,
            content=request.content,
        )
    )


@router.post("/{comment_id}/reactions", response_model=ToggleReactionResponse)
async def toggle_comment_reaction(
    slug: str,
    comment_id: int,
    use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleReactionResponse:
    """React to a comment, or withdraw the reaction if present."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        ToggleReactionRequest(
            slug=slug,
            account_id=account_id,
            target=ReactionTarget.COMMENT,
            comment_id=comment_id,
        )
    )


@router.delete("/{comment_id}/reactions", response_model=RemoveReactionResponse)
async def remove_comment_reaction(
    slug: str,
    comment_id: int,
    use_case: FromDishka[RemoveReactionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> RemoveReactionResponse:
    """Withdraw a comment reaction; 400 if there is none."""
    account_id = require_account_id(jwt_service, authorization)
    return await use_case.execute(
        RemoveReactionRequest(
            slug=slug,
            account_id=account_id,
            target=ReactionTarget.COMMENT,
            comment_id=comment_id,
        )
    )
