"""In-memory tour activity repository for testing."""

from tour.domain.model.tour_activity import TourActivity
from tour.domain.repository.tour_activity import TourActivityRepository
from tour.domain.value import TourId, UserId


class InMemoryTourActivityRepository(TourActivityRepository):
    """In-memory implementation of TourActivityRepository for testing."""

    def __init__(self) -> None:
        self._activity: dict[tuple[TourId, UserId], TourActivity] = {}

    async def find_by_user(self, user_id: UserId) -> dict[TourId, TourActivity]:
        return {
            tour_id: activity
            for (tour_id, uid), activity in self._activity.items()
            if uid == user_id
        }

    async def save(self, activity: TourActivity) -> TourActivity:
        self._activity[(activity.tour_id, activity.user_id)] = activity
        return activity
