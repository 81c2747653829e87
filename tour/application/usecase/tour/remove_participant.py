"""Remove participant use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TourService, VoteService
from tour.domain.value import TourId, UserId


class RemoveParticipantRequest(BaseModel):
    """Owner removing ``participant_id``, or a participant leaving."""

    tour_id: str
    user_id: str
    participant_id: str


class RemoveParticipantUseCase(BaseUseCase):
    """Use case for removing a participant together with their vote."""

    def __init__(self, tour_service: TourService, vote_service: VoteService) -> None:
        self.tour_service = tour_service
        self.vote_service = vote_service

    async def execute(self, request: RemoveParticipantRequest) -> None:
        """Execute remove participant use case.

        Raises:
            NotFoundError: If the tour does not exist, the caller is not a
                participant, or ``participant_id`` is not on the tour
            NotAuthorizedError: If a non-owner removes someone else
            BusinessRuleViolationError: If the owner is removed
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))
        participant_id = UserId(UUID(request.participant_id))

        with logfire.span(
            "remove_participant",
            tour_id=str(tour_id),
            user_id=str(user_id),
            participant_id=str(participant_id),
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            await self.tour_service.remove_participant(
                tour, participant_id, requested_by=user_id
            )
            if await self.vote_service.withdraw_vote(tour_id, participant_id):
                logfire.info(
                    "Vote withdrawn with participant",
                    tour_id=str(tour_id),
                    user_id=str(participant_id),
                )
