"""Participant routes (listing members, leaving and removing)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, Response, status

from tour.application.usecase.tour import (
    ListParticipantsRequest,
    ListParticipantsResponse,
    ListParticipantsUseCase,
    RemoveParticipantRequest,
    RemoveParticipantUseCase,
)
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(
    prefix="/api/tours/{tour_id}/participants",
    tags=["participants"],
    route_class=DishkaRoute,
)


@router.get("", response_model=ListParticipantsResponse)
async def list_participants(
    tour_id: UUID,
    request: Request,
    list_use_case: FromDishka[ListParticipantsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> ListParticipantsResponse:
    """Everyone on the tour, owner first."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await list_use_case.execute(
            ListParticipantsRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def remove_participant(
    tour_id: UUID,
    user_id: UUID,
    request: Request,
    remove_use_case: FromDishka[RemoveParticipantUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Leave a tour (own ID) or remove a participant (owner only).

    Raises:
        HTTPException: 400 when removing the owner, 403 when a participant
            removes someone else, 404 if ``user_id`` is not on the tour
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        await remove_use_case.execute(
            RemoveParticipantRequest(
                tour_id=str(tour_id),
                user_id=payload.user_id,
                participant_id=str(user_id),
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
