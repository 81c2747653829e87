"""Participant repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.participant import Participant
from tour.domain.value import Email, TourId, UserId


class ParticipantRepository(ABC):
    """Repository for tour memberships."""

    @abstractmethod
    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        """Check whether a user participates in a tour."""
        pass

    @abstractmethod
    async def find_emails_by_tour(self, tour_id: TourId) -> set[Email]:
        """Return the email addresses of all participants of a tour."""
        pass

    @abstractmethod
    async def find_by_tour(self, tour_id: TourId) -> list[Participant]:
        """Return all participants of a tour, oldest first."""
        pass

    @abstractmethod
    async def save(self, participant: Participant) -> Participant:
        """Add a participant.

        Raises:
            IntegrityError: If the user already participates in the tour
        """
        pass

    @abstractmethod
    async def find_tour_ids_by_user(self, user_id: UserId) -> list[TourId]:
        """Return the tours a user participates in."""
        pass

    @abstractmethod
    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        """Remove a user from a tour.

        Returns:
            True if removed, False if the user was not a participant
        """
        pass
