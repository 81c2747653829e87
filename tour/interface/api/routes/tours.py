"""Tour routes (tour CRUD, voting lock and owner invitation management)."""

from datetime import date
from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel, Field

from tour.application.usecase.invitation import (
    ListTourInvitationsRequest,
    ListTourInvitationsResponse,
    ListTourInvitationsUseCase,
    SendInvitationsRequest,
    SendInvitationsResponse,
    SendInvitationsUseCase,
)
from tour.application.usecase.tour import (
    CreateTourRequest,
    CreateTourResponse,
    CreateTourUseCase,
    DeleteTourRequest,
    DeleteTourUseCase,
    GetTourRequest,
    GetTourResponse,
    GetTourUseCase,
    ListToursRequest,
    ListToursResponse,
    ListToursUseCase,
    MarkTourViewedRequest,
    MarkTourViewedResponse,
    MarkTourViewedUseCase,
    SetVotingLockRequest,
    SetVotingLockUseCase,
    TourDetails,
    UpdateTourRequest,
    UpdateTourUseCase,
)
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.domain.value import TourStatus
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(prefix="/api/tours", tags=["tours"], route_class=DishkaRoute)


class CreateTourAPIRequest(BaseModel):
    """API request for creating a tour."""

    title: str = Field(min_length=1, max_length=255)
    destination: str | None = Field(default=None, max_length=255)
    description: str | None = None
    start_date: date
    end_date: date


class UpdateTourAPIRequest(BaseModel):
    """API request for editing a tour; omitted fields are left alone."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    destination: str | None = Field(default=None, max_length=255)
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: TourStatus | None = None


class SendInvitationsAPIRequest(BaseModel):
    """API request for inviting email addresses."""

    emails: list[str] = Field(min_length=1)


@router.post(
    "", response_model=CreateTourResponse, status_code=status.HTTP_201_CREATED
)
async def create_tour(
    body: CreateTourAPIRequest,
    request: Request,
    create_tour_use_case: FromDishka[CreateTourUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> CreateTourResponse:
    """Create a tour owned by the current user."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await create_tour_use_case.execute(
            CreateTourRequest(user_id=payload.user_id, **body.model_dump())
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.get("/{tour_id}/invitations", response_model=ListTourInvitationsResponse)
async def list_tour_invitations(
    tour_id: UUID,
    request: Request,
    list_use_case: FromDishka[ListTourInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListTourInvitationsResponse:
    """List a tour's invitations with the actions available to the owner.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the tour owner
    """
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await list_use_case.execute(
            ListTourInvitationsRequest(
                tour_id=str(tour_id),
                user_id=payload.user_id,
                page=page,
                limit=limit,
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/{tour_id}/invitations", response_model=SendInvitationsResponse)
async def send_invitations(
    tour_id: UUID,
    body: SendInvitationsAPIRequest,
    request: Request,
    send_use_case: FromDishka[SendInvitationsUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> SendInvitationsResponse:
    """Invite a batch of email addresses to a tour.

    Addresses that could not be invited are reported in ``errors``; the
    request itself only fails for tour-level problems.

    Raises:
        HTTPException: 400 for an oversized batch or archived tour,
            403 if not the tour owner, 429 when rate limited
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "TOUR_INVITATIONS", payload.user_id)

    try:
        return await send_use_case.execute(
            SendInvitationsRequest(
                tour_id=str(tour_id), user_id=payload.user_id, emails=body.emails
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.get("", response_model=ListToursResponse)
async def list_tours(
    request: Request,
    list_use_case: FromDishka[ListToursUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
    tour_status: Literal["active", "archived"] = Query(default="active", alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListToursResponse:
    """List the current user's tours, flagging those with unseen activity."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await list_use_case.execute(
            ListToursRequest(
                user_id=payload.user_id, status=tour_status, page=page, limit=limit
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.get("/{tour_id}", response_model=GetTourResponse)
async def get_tour(
    tour_id: UUID,
    request: Request,
    get_use_case: FromDishka[GetTourUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> GetTourResponse:
    """Tour details with the vote tally.

    Raises:
        HTTPException: 404 if the tour does not exist or the caller is not
            a participant
    """
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await get_use_case.execute(
            GetTourRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.patch("/{tour_id}", response_model=TourDetails)
async def update_tour(
    tour_id: UUID,
    body: UpdateTourAPIRequest,
    request: Request,
    update_use_case: FromDishka[UpdateTourUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> TourDetails:
    """Edit a tour.

    Raises:
        HTTPException: 400 for an archived tour or inverted dates,
            403 if not the tour owner
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await update_use_case.execute(
            UpdateTourRequest(
                tour_id=str(tour_id),
                user_id=payload.user_id,
                **body.model_dump(exclude_unset=True),
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.delete(
    "/{tour_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_tour(
    tour_id: UUID,
    request: Request,
    delete_use_case: FromDishka[DeleteTourUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a tour and everything attached to it.

    Raises:
        HTTPException: 403 if not the tour owner
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        await delete_use_case.execute(
            DeleteTourRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{tour_id}/voting/{action}", response_model=TourDetails)
async def set_voting_lock(
    tour_id: UUID,
    action: Literal["lock", "unlock"],
    request: Request,
    lock_use_case: FromDishka[SetVotingLockUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> TourDetails:
    """Freeze or reopen the vote tally.

    Raises:
        HTTPException: 400 for an archived tour, 403 if not the tour owner
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await lock_use_case.execute(
            SetVotingLockRequest(
                tour_id=str(tour_id),
                user_id=payload.user_id,
                locked=action == "lock",
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/{tour_id}/mark-viewed", response_model=MarkTourViewedResponse)
async def mark_tour_viewed(
    tour_id: UUID,
    request: Request,
    viewed_use_case: FromDishka[MarkTourViewedUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> MarkTourViewedResponse:
    """Clear the tour's new-activity marker for the current user."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await viewed_use_case.execute(
            MarkTourViewedRequest(tour_id=str(tour_id), user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)
