"""Lock or unlock voting use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tour.details import TourDetails
from tour.domain.service import TourService
from tour.domain.value import TourId, UserId


class SetVotingLockRequest(BaseModel):
    """Request to freeze or reopen voting on a tour."""

    tour_id: str
    user_id: str
    locked: bool


class SetVotingLockUseCase(BaseUseCase):
    """Use case for the owner locking or unlocking votes."""

    def __init__(self, tour_service: TourService) -> None:
        self.tour_service = tour_service

    async def execute(self, request: SetVotingLockRequest) -> TourDetails:
        """Execute set voting lock use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
            NotAuthorizedError: If the caller does not own the tour
            BusinessRuleViolationError: If the tour is archived
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "set_voting_lock",
            tour_id=str(tour_id),
            user_id=str(user_id),
            locked=request.locked,
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            action = "lock voting on" if request.locked else "unlock voting on"
            self.tour_service.ensure_owner(tour, user_id, action)

            tour = await self.tour_service.set_voting_locked(tour, request.locked)
            return TourDetails.from_tour(tour, user_id)
