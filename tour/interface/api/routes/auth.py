"""Authentication routes (invitation OTP sign-in, session and sign-out)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, Response
from pydantic import BaseModel

from tour.application.usecase.invitation import (
    VerifyInvitationOTPRequest,
    VerifyInvitationOTPUseCase,
)
from tour.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from tour.config import Settings
from tour.domain.error import DomainError
from tour.domain.service import CSRFService, JWTService, RateLimitService
from tour.interface.api.guards import authenticate, enforce_rate_limit, verify_csrf
from tour.interface.error import http_error_from_domain

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class VerifyInvitationAPIRequest(BaseModel):
    """OTP taken from the invitation link."""

    otp: str


class VerifyInvitationAPIResponse(BaseModel):
    """Invitation to show once the invitee is signed in."""

    invitation_token: str
    user_id: str
    is_new_user: bool


@router.post("/verify-invitation", response_model=VerifyInvitationAPIResponse)
async def verify_invitation(
    body: VerifyInvitationAPIRequest,
    request: Request,
    response: Response,
    verify_use_case: FromDishka[VerifyInvitationOTPUseCase],
    rate_limiter: FromDishka[RateLimitService],
    settings: FromDishka[Settings],
) -> VerifyInvitationAPIResponse:
    """Sign the invitee in with the one-time code from their email.

    Exempt from CSRF checks: the caller has no session yet and the OTP
    itself proves possession of the mailbox.

    Raises:
        HTTPException: 429 when rate limited, 400 for an invalid or used code
    """
    enforce_rate_limit(request, rate_limiter, "OTP_VERIFICATION")

    try:
        result = await verify_use_case.execute(VerifyInvitationOTPRequest(otp=body.otp))
    except DomainError as e:
        raise http_error_from_domain(e)

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.session_token,
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
        path="/",
    )
    return VerifyInvitationAPIResponse(
        invitation_token=result.invitation_token,
        user_id=result.user_id,
        is_new_user=result.is_new_user,
    )


class SignOutAPIResponse(BaseModel):
    success: bool


@router.get("/session", response_model=GetCurrentUserResponse)
async def get_session(
    request: Request,
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    rate_limiter: FromDishka[RateLimitService],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """The account behind the session cookie.

    Raises:
        HTTPException: 401 without a valid session, 404 if the account is gone
    """
    payload = authenticate(auth_token, jwt_service)
    enforce_rate_limit(request, rate_limiter, "AUTH", payload.user_id)

    try:
        return await current_user_use_case.execute(
            GetCurrentUserRequest(user_id=payload.user_id)
        )
    except DomainError as e:
        raise http_error_from_domain(e)


@router.post("/signout", response_model=SignOutAPIResponse)
async def sign_out(
    request: Request,
    response: Response,
    csrf_service: FromDishka[CSRFService],
    rate_limiter: FromDishka[RateLimitService],
    settings: FromDishka[Settings],
) -> SignOutAPIResponse:
    """Clear the session cookie.

    Signing out without a session is not an error. The session JWT is
    stateless, so a copied token stays valid until it expires.
    """
    verify_csrf(request, csrf_service)
    enforce_rate_limit(request, rate_limiter, "AUTH")

    response.delete_cookie(
        key=settings.auth.cookie_name,
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
        path="/",
    )
    return SignOutAPIResponse(success=True)
