"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel, Field

from tour.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from tour.domain.error import DomainError
from tour.domain.model.comment import MAX_COMMENT_LENGTH
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(
    prefix="/api/tours/{tour_id}/comments", tags=["comments"], route_class=DishkaRoute
)


class CommentAPIRequest(BaseModel):
    """Comment text for posting or editing."""

    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    tour_id: UUID,
    request: Request,
    list_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=100),
) -> ListCommentsResponse:
    """One page of the tour's comments, oldest first."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await list_use_case.execute(
            ListCommentsRequest(
                tour_id=str(tour_id), user_id=payload.user_id, page=page, limit=limit
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    tour_id: UUID,
    body: CommentAPIRequest,
    request: Request,
    create_use_case: FromDishka[CreateCommentUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Post a comment.

    Raises:
        HTTPException: 400 for an archived tour or blank content
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await create_use_case.execute(
            CreateCommentRequest(
                tour_id=str(tour_id), user_id=payload.user_id, content=body.content
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    tour_id: UUID,
    comment_id: UUID,
    body: CommentAPIRequest,
    request: Request,
    update_use_case: FromDishka[UpdateCommentUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit one's own comment.

    Raises:
        HTTPException: 403 if not the author, 404 if the comment is not on
            this tour
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await update_use_case.execute(
            UpdateCommentRequest(
                tour_id=str(tour_id),
                comment_id=str(comment_id),
                user_id=payload.user_id,
                content=body.content,
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.delete(
    "/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_comment(
    tour_id: UUID,
    comment_id: UUID,
    request: Request,
    delete_use_case: FromDishka[DeleteCommentUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete one's own comment."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        await delete_use_case.execute(
            DeleteCommentRequest(
                tour_id=str(tour_id),
                comment_id=str(comment_id),
                user_id=payload.user_id,
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
