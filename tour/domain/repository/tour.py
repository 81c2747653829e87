"""Tour repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.tour import Tour
from tour.domain.value import TourId


class TourRepository(ABC):
    """Repository for Tour entity."""

    @abstractmethod
    async def find_by_id(self, tour_id: TourId) -> Tour | None:
        """Find a tour by ID.

        Args:
            tour_id: The tour's unique identifier

        Returns:
            The tour if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, tour: Tour) -> Tour:
        """Save a tour (create or update)."""
        pass

    @abstractmethod
    async def find_by_ids(
        self,
        tour_ids: list[TourId],
        archived: bool,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tour]:
        """Find tours among ``tour_ids``, soonest start date first.

        Args:
            tour_ids: Candidate tours (typically the caller's memberships)
            archived: True for archived tours, False for active ones
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of tours
        """
        pass

    @abstractmethod
    async def count_by_ids(self, tour_ids: list[TourId], archived: bool) -> int:
        """Count the tours ``find_by_ids`` pages through."""
        pass

    @abstractmethod
    async def delete(self, tour_id: TourId) -> bool:
        """Delete a tour with its participants, invitations, votes, comments
        and tag links.

        Returns:
            True if deleted, False if not found
        """
        pass
