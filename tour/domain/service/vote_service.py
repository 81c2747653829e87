"""Vote domain service."""

import logfire

from tour.domain.error import BusinessRuleViolationError
from tour.domain.model import Tour, Vote
from tour.domain.repository import VoteRepository
from tour.domain.value import TourId, UserId

from .base import Service


class VoteService(Service):
    """One vote per participant per tour, frozen while voting is locked."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        self.vote_repository = vote_repository

    async def get_voters(self, tour_id: TourId) -> list[UserId]:
        """User IDs that voted for the tour, oldest vote first."""
        return await self.vote_repository.find_user_ids_by_tour(tour_id)

    async def has_voted(self, tour_id: TourId, user_id: UserId) -> bool:
        return await self.vote_repository.exists(tour_id, user_id)

    async def toggle_vote(self, tour: Tour, user_id: UserId) -> bool:
        """Add the user's vote, or take it back if they already voted.

        Args:
            tour: Tour being voted on
            user_id: Voting participant

        Returns:
            True if a vote was added, False if it was removed

        Raises:
            BusinessRuleViolationError: If the tour is archived or voting
                is locked
        """
        with logfire.span(
            "vote_service.toggle_vote", tour_id=str(tour.id), user_id=str(user_id)
        ):
            if tour.is_archived:
                raise BusinessRuleViolationError(
                    "Cannot vote on an archived tour. Archived tours are read-only."
                )
            if tour.voting_locked:
                raise BusinessRuleViolationError("Voting is locked for this tour")

            if await self.vote_repository.exists(tour.id, user_id):
                await self.vote_repository.delete(tour.id, user_id)
                logfire.info("Vote removed", tour_id=str(tour.id), user_id=str(user_id))
                return False

            await self.vote_repository.save(Vote(tour_id=tour.id, user_id=user_id))
            logfire.info("Vote added", tour_id=str(tour.id), user_id=str(user_id))
            return True

    async def withdraw_vote(self, tour_id: TourId, user_id: UserId) -> bool:
        """Drop a departing participant's vote, regardless of the lock.

        Returns:
            True if there was a vote to drop
        """
        return await self.vote_repository.delete(tour_id, user_id)
