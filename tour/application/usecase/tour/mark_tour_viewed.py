"""Mark tour viewed use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TourService
from tour.domain.value import TourId, UserId


class MarkTourViewedRequest(BaseModel):
    tour_id: str
    user_id: str


class MarkTourViewedResponse(BaseModel):
    last_viewed_at: datetime


class MarkTourViewedUseCase(BaseUseCase):
    """Clears the tour's "new activity" marker for the caller."""

    def __init__(self, tour_service: TourService) -> None:
        self.tour_service = tour_service

    async def execute(self, request: MarkTourViewedRequest) -> MarkTourViewedResponse:
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        tour = await self.tour_service.get_for_participant(tour_id, user_id)
        activity = await self.tour_service.mark_viewed(tour, user_id)
        return MarkTourViewedResponse(last_viewed_at=activity.last_viewed_at)
