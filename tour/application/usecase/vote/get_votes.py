"""Get votes use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.common import UserSummary
from tour.domain.service import TourService, UserService, VoteService
from tour.domain.value import TourId, UserId


class GetVotesRequest(BaseModel):
    """Request for a tour's votes."""

    tour_id: str
    user_id: str


class GetVotesResponse(BaseModel):
    """Vote tally with the voters, oldest vote first."""

    vote_count: int
    has_voted: bool
    voting_locked: bool
    voters: list[UserSummary]


class GetVotesUseCase(BaseUseCase):
    """Use case for showing who voted for a tour."""

    def __init__(
        self,
        tour_service: TourService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.tour_service = tour_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetVotesRequest) -> GetVotesResponse:
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_votes", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            voter_ids = await self.vote_service.get_voters(tour_id)
            users = await self.user_service.get_many(voter_ids)

            return GetVotesResponse(
                vote_count=len(voter_ids),
                has_voted=user_id in voter_ids,
                voting_locked=tour.voting_locked,
                voters=[
                    UserSummary.from_user(users[voter_id])
                    for voter_id in voter_ids
                    if voter_id in users
                ],
            )
