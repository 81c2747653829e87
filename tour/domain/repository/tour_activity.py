"""Tour activity repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.tour_activity import TourActivity
from tour.domain.value import TourId, UserId


class TourActivityRepository(ABC):
    """Repository for per-user tour view timestamps."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> dict[TourId, TourActivity]:
        """Return the user's view records keyed by tour."""
        pass

    @abstractmethod
    async def save(self, activity: TourActivity) -> TourActivity:
        """Insert or replace the record for the tour and user."""
        pass
