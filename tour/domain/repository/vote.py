"""Vote repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.vote import Vote
from tour.domain.value import TourId, UserId


class VoteRepository(ABC):
    """Repository for tour votes."""

    @abstractmethod
    async def find_user_ids_by_tour(self, tour_id: TourId) -> list[UserId]:
        """Return the users who voted for a tour, earliest vote first."""
        pass

    @abstractmethod
    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Add a vote.

        Raises:
            IntegrityError: If the user already voted for the tour
        """
        pass

    @abstractmethod
    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        """Remove a user's vote.

        Returns:
            True if removed, False if there was no vote
        """
        pass
