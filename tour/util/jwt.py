"""Session JWTs issued after an invitee verifies their OTP."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from tour.config import AuthSettings

ISSUER = "tour-planner-api"


class TokenPayload(BaseModel):
    """Claims of a session token."""

    user_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """Session token could not be verified."""

    pass


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Encode a session token for ``user_id``.

    The email claim lets invitation routes match the caller against the
    invited address without a user lookup.
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iss": ISSUER,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode and check a session token.

    Raises:
        JWTError: If the token is expired, forged, from another issuer or
            missing required claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=ISSUER,
            options={"require": ["sub", "email", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(user_id=claims["sub"], email=claims["email"], exp=claims["exp"])
