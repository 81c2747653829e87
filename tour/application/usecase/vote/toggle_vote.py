"""Toggle vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TourService, VoteService
from tour.domain.value import TourId, UserId


class ToggleVoteRequest(BaseModel):
    """Request to vote for a tour, or take the vote back."""

    tour_id: str
    user_id: str


class ToggleVoteResponse(BaseModel):
    """Caller's vote after the toggle and the new tally."""

    voted: bool
    message: str
    vote_count: int


class ToggleVoteUseCase(BaseUseCase):
    """Use case for a participant voting on a tour."""

    def __init__(self, tour_service: TourService, vote_service: VoteService) -> None:
        self.tour_service = tour_service
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
            BusinessRuleViolationError: If the tour is archived or voting
                is locked
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("toggle_vote", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            voted = await self.vote_service.toggle_vote(tour, user_id)
            await self.tour_service.touch(tour)

            voters = await self.vote_service.get_voters(tour_id)
            return ToggleVoteResponse(
                voted=voted,
                message="Vote added" if voted else "Vote removed",
                vote_count=len(voters),
            )
