"""Update tour use case."""

from datetime import date
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tour.details import TourDetails
from tour.domain.error import ValidationError
from tour.domain.service import TourService
from tour.domain.value import TourId, TourStatus, UserId

REQUIRED_FIELDS = ("title", "start_date", "end_date", "status")


class UpdateTourRequest(BaseModel):
    """Partial update; fields left out are not changed."""

    tour_id: str
    user_id: str
    title: str | None = Field(default=None, min_length=1, max_length=255)
    destination: str | None = Field(default=None, max_length=255)
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: TourStatus | None = None


class UpdateTourUseCase(BaseUseCase):
    """Use case for the owner editing a tour."""

    def __init__(self, tour_service: TourService) -> None:
        self.tour_service = tour_service

    async def execute(self, request: UpdateTourRequest) -> TourDetails:
        """Execute update tour use case.

        ``destination`` and ``description`` can be cleared with null; the
        other fields cannot.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
            NotAuthorizedError: If the caller does not own the tour
            BusinessRuleViolationError: If the tour is archived
            ValidationError: If a required field is nulled or the dates are
                inverted
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))
        changes = request.model_dump(exclude_unset=True, exclude={"tour_id", "user_id"})

        with logfire.span("update_tour", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            self.tour_service.ensure_owner(tour, user_id, "edit")

            for field in REQUIRED_FIELDS:
                if field in changes and changes[field] is None:
                    raise ValidationError(f"{field} cannot be empty")

            tour = await self.tour_service.update_tour(tour, changes)
            return TourDetails.from_tour(tour, user_id)
