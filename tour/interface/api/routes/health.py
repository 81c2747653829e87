"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from tour.config import Settings
from tour.domain.service import RateLimitService, get_rate_limit_mode
from tour.domain.value import RateLimitMode

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    rate_limit_mode: RateLimitMode


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    rate_limiter: FromDishka[RateLimitService],
) -> HealthResponse:
    """Basic health check endpoint.

    Resolving the rate limiter here starts it (and its sweep) with the app.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        rate_limit_mode=get_rate_limit_mode(settings).mode,
    )
