"""Tag routes (tags on archived tours and tag autocomplete)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel, Field

from tour.application.usecase.tag import (
    AddTourTagRequest,
    AddTourTagUseCase,
    ListTourTagsRequest,
    ListTourTagsUseCase,
    RemoveTourTagRequest,
    RemoveTourTagUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
    TagItem,
    TagListResponse,
)
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(prefix="/api", tags=["tags"], route_class=DishkaRoute)


class AddTagAPIRequest(BaseModel):
    tag_name: str = Field(min_length=1, max_length=100)


@router.get("/tags", response_model=TagListResponse)
async def search_tags(
    request: Request,
    search_use_case: FromDishka[SearchTagsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
    q: str = Query(default="", max_length=50),
    limit: int = Query(default=10, ge=1, le=50),
) -> TagListResponse:
    """Tags starting with ``q``, for autocomplete."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    return await search_use_case.execute(SearchTagsRequest(query=q, limit=limit))


@router.get("/tours/{tour_id}/tags", response_model=TagListResponse)
async def list_tour_tags(
    tour_id: UUID,
    request: Request,
    list_use_case: FromDishka[ListTourTagsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> TagListResponse:
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await list_use_case.execute(
            ListTourTagsRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post(
    "/tours/{tour_id}/tags",
    response_model=TagItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_tour_tag(
    tour_id: UUID,
    body: AddTagAPIRequest,
    request: Request,
    add_use_case: FromDishka[AddTourTagUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> TagItem:
    """Tag an archived tour, creating the tag on first use.

    Raises:
        HTTPException: 400 if the tour is not archived or the name is blank
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await add_use_case.execute(
            AddTourTagRequest(
                tour_id=str(tour_id), user_id=payload.user_id, tag_name=body.tag_name
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.delete(
    "/tours/{tour_id}/tags/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_tour_tag(
    tour_id: UUID,
    tag_id: int,
    request: Request,
    remove_use_case: FromDishka[RemoveTourTagUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Untag an archived tour."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        await remove_use_case.execute(
            RemoveTourTagRequest(
                tour_id=str(tour_id), user_id=payload.user_id, tag_id=tag_id
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
