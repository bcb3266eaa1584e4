"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from quill.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
)
from quill.domain.service import JWTService
from quill.interface.api.auth import optional_account_id

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchResponse)
async def search(
    use_case: FromDishka[SearchUseCase],
    jwt_service: FromDishka[JWTService],
    q: str = Query(min_length=1),
    authorization: str | None = Header(default=None),
) -> SearchResponse:
    """Search posts, comments and usernames for a keyword."""
    viewer_id = optional_account_id(jwt_service, authorization)
    return await use_case.execute(SearchRequest(keyword=q, viewer_id=viewer_id))
