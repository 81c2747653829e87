"""Delete tour use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TourService
from tour.domain.value import TourId, UserId


class DeleteTourRequest(BaseModel):
    """Request to delete a tour."""

    tour_id: str
    user_id: str


class DeleteTourUseCase(BaseUseCase):
    """Use case for the owner deleting a tour.

    Participants, invitations, votes, comments, tags and view timestamps go
    with it.
    """

    def __init__(self, tour_service: TourService) -> None:
        self.tour_service = tour_service

    async def execute(self, request: DeleteTourRequest) -> None:
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_tour", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            self.tour_service.ensure_owner(tour, user_id, "delete")
            await self.tour_service.delete_tour(tour)
