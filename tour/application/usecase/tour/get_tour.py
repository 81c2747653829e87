"""Get tour use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tour.details import TourDetails
from tour.domain.service import TourService, VoteService
from tour.domain.value import TourId, UserId


class GetTourRequest(BaseModel):
    """Request for a single tour."""

    tour_id: str
    user_id: str


class GetTourResponse(TourDetails):
    """Tour with its vote tally."""

    vote_count: int
    has_voted: bool


class GetTourUseCase(BaseUseCase):
    """Use case for opening a tour the caller participates in."""

    def __init__(self, tour_service: TourService, vote_service: VoteService) -> None:
        self.tour_service = tour_service
        self.vote_service = vote_service

    async def execute(self, request: GetTourRequest) -> GetTourResponse:
        """Execute get tour use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_tour", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            voters = await self.vote_service.get_voters(tour_id)

            return GetTourResponse(
                **TourDetails.from_tour(tour, user_id).model_dump(),
                vote_count=len(voters),
                has_voted=user_id in voters,
            )
