"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request

from tour.application.usecase.vote import (
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(prefix="/api/tours/{tour_id}", tags=["votes"], route_class=DishkaRoute)


@router.get("/votes", response_model=GetVotesResponse)
async def get_votes(
    tour_id: UUID,
    request: Request,
    votes_use_case: FromDishka[GetVotesUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> GetVotesResponse:
    """Vote tally and voters."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await votes_use_case.execute(
            GetVotesRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/vote", response_model=ToggleVoteResponse)
async def toggle_vote(
    tour_id: UUID,
    request: Request,
    toggle_use_case: FromDishka[ToggleVoteUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleVoteResponse:
    """Vote for the tour, or take the vote back.

    Raises:
        HTTPException: 400 if voting is locked or the tour is archived
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await toggle_use_case.execute(
            ToggleVoteRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)
