"""Request guards called at the top of route handlers.

Guards run in a fixed order: CSRF check, authentication, then rate limit,
so rejected forgeries and anonymous calls never consume a caller's quota.
"""

from fastapi import HTTPException, Request, status

from tour.domain.service import (
    CSRFService,
    JWTService,
    RateLimitService,
    get_client_identifier,
)
from tour.util.jwt import JWTError, TokenPayload


def verify_csrf(request: Request, csrf_service: CSRFService) -> None:
    """Reject state-changing requests without a matching CSRF token.

    Raises:
        HTTPException: 403 if the cookie and header tokens are missing or differ
    """
    if not csrf_service.requires_check(request.method, request.url.path):
        return

    cookie_token = request.cookies.get(csrf_service.settings.cookie_name)
    header_token = request.headers.get(csrf_service.settings.header_name)
    if not csrf_service.validate_token(cookie_token, header_token):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid CSRF token",
        )


def authenticate(auth_token: str | None, jwt_service: JWTService) -> TokenPayload:
    """Resolve the session cookie to its token payload.

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def enforce_rate_limit(
    request: Request,
    rate_limiter: RateLimitService,
    name: str,
    user_id: str | None = None,
) -> None:
    """Count the request against the named limit.

    Args:
        request: Incoming request (client address headers)
        rate_limiter: Process-wide rate limiter
        name: Limit name, e.g. ``"TOUR_INVITATIONS"``
        user_id: Authenticated caller, limited per account when given

    Raises:
        HTTPException: 429 with ``Retry-After`` and ``X-RateLimit-*`` headers
    """
    config = rate_limiter.configs.by_name(name)
    identifier = get_client_identifier(request, user_id)
    result = rate_limiter.check_rate_limit(identifier, config, label=name)
    if result.allowed:
        return

    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Too many requests. Please try again later.",
        headers={
            "Retry-After": str(rate_limiter.retry_after_seconds(result)),
            "X-RateLimit-Limit": str(config.max_requests),
            "X-RateLimit-Remaining": str(result.remaining),
            "X-RateLimit-Reset": str(result.reset_at),
        },
    )
