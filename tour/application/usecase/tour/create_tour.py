"""Create tour use case."""

from datetime import date, datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.domain.error import ValidationError
from tour.domain.service import TourService, UserService
from tour.domain.value import TourStatus, UserId


class CreateTourRequest(BaseModel):
    """Request to create a tour."""

    user_id: str
    title: str = Field(min_length=1, max_length=255)
    destination: str | None = Field(default=None, max_length=255)
    description: str | None = None
    start_date: date
    end_date: date


class CreateTourResponse(BaseModel):
    """Created tour."""

    tour_id: str
    owner_id: str
    title: str
    destination: str | None
    start_date: date
    end_date: date
    status: TourStatus
    created_at: datetime


class CreateTourUseCase(BaseUseCase):
    """Use case for creating a tour; the creator becomes its owner."""

    def __init__(self, tour_service: TourService, user_service: UserService) -> None:
        self.tour_service = tour_service
        self.user_service = user_service

    async def execute(self, request: CreateTourRequest) -> CreateTourResponse:
        """Execute create tour use case.

        Raises:
            ValidationError: If the end date precedes the start date
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("create_tour", user_id=str(user_id)):
            if request.end_date < request.start_date:
                raise ValidationError("End date must be on or after start date")

            owner = await self.user_service.get_by_id(user_id)
            tour = await self.tour_service.create_tour(
                owner,
                title=request.title,
                start_date=request.start_date,
                end_date=request.end_date,
                destination=request.destination,
                description=request.description,
            )
            return CreateTourResponse(
                tour_id=str(tour.id),
                owner_id=str(tour.owner_id),
                title=tour.title,
                destination=tour.destination,
                start_date=tour.start_date,
                end_date=tour.end_date,
                status=tour.status,
                created_at=tour.created_at,
            )
