"""CSRF token routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from tour.config import Settings
from tour.domain.service import CSRFService

router = APIRouter(prefix="/api", tags=["csrf"], route_class=DishkaRoute)


class CSRFTokenResponse(BaseModel):
    """CSRF token to echo back in the ``x-csrf-token`` header."""

    csrf_token: str


@router.get("/csrf-token", response_model=CSRFTokenResponse)
async def get_csrf_token(
    request: Request,
    response: Response,
    csrf_service: FromDishka[CSRFService],
    settings: FromDishka[Settings],
) -> CSRFTokenResponse:
    """Issue the CSRF token cookie (reusing a valid existing one).

    Returns:
        The token value, for clients that cannot read the httponly cookie
    """
    token = csrf_service.get_or_create_token(
        request.cookies.get(settings.csrf.cookie_name)
    )
    response.set_cookie(
        key=settings.csrf.cookie_name,
        value=token,
        max_age=settings.csrf.max_age_seconds,
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
        path="/",
    )
    return CSRFTokenResponse(csrf_token=token)
