"""Invitation routes (invitee side, plus cancel and resend)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request

from tour.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
    DeclineInvitationRequest,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
    GetInvitationByTokenRequest,
    GetInvitationByTokenResponse,
    GetInvitationByTokenUseCase,
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
    ResendInvitationRequest,
    ResendInvitationResponse,
    ResendInvitationUseCase,
)
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(
    prefix="/api/invitations", tags=["invitations"], route_class=DishkaRoute
)


@router.get("/pending", response_model=GetPendingInvitationsResponse)
async def get_pending_invitations(
    request: Request,
    pending_use_case: FromDishka[GetPendingInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> GetPendingInvitationsResponse:
    """Pending, unexpired invitations addressed to the current user."""
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "API", payload.user_id)

    try:
        return await pending_use_case.execute(
            GetPendingInvitationsRequest(user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.get("/by-token/{token}", response_model=GetInvitationByTokenResponse)
async def get_invitation_by_token(
    token: str,
    request: Request,
    by_token_use_case: FromDishka[GetInvitationByTokenUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> GetInvitationByTokenResponse:
    """Invitation details for the landing page of an invitation link.

    No session is required; signed-in callers are limited per account.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    enforce_rate_limit(request, rate_limiter, "API", user_id)

    try:
        return await by_token_use_case.execute(GetInvitationByTokenRequest(token=token))
    except DomainError as e:
        raise http_error_from_domain(e)


@router.delete("/{invitation_id}", response_model=CancelInvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    request: Request,
    cancel_use_case: FromDishka[CancelInvitationUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> CancelInvitationResponse:
    """Withdraw an invitation (tour owner only)."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "INVITATION_ACTION", payload.user_id)

    try:
        return await cancel_use_case.execute(
            CancelInvitationRequest(
                invitation_id=str(invitation_id), user_id=payload.user_id
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/{invitation_id}/resend", response_model=ResendInvitationResponse)
async def resend_invitation(
    invitation_id: UUID,
    request: Request,
    resend_use_case: FromDishka[ResendInvitationUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> ResendInvitationResponse:
    """Send a declined or expired invitation again with a fresh link.

    Raises:
        HTTPException: 502 if the email could not be delivered
    """
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "INVITATION_RESEND", payload.user_id)

    try:
        return await resend_use_case.execute(
            ResendInvitationRequest(
                invitation_id=str(invitation_id), user_id=payload.user_id
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/{invitation_id}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    invitation_id: UUID,
    request: Request,
    accept_use_case: FromDishka[AcceptInvitationUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptInvitationResponse:
    """Accept an invitation and join the tour."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "INVITATION_ACTION", payload.user_id)

    try:
        return await accept_use_case.execute(
            AcceptInvitationRequest(
                invitation_id=str(invitation_id), user_id=payload.user_id
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/{invitation_id}/decline", response_model=DeclineInvitationResponse)
async def decline_invitation(
    invitation_id: UUID,
    request: Request,
    decline_use_case: FromDishka[DeclineInvitationUseCase],
    csrf_service: FromDishka[CSRFService],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> DeclineInvitationResponse:
    """Decline an invitation."""
    verify_csrf(request, csrf_service)
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "INVITATION_ACTION", payload.user_id)

    try:
        return await decline_use_case.execute(
            DeclineInvitationRequest(
                invitation_id=str(invitation_id), user_id=payload.user_id
            )
        )
    except DomainError as e:
        raise http_error_from_domain(e)
