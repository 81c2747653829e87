"""In-memory tour repository for testing."""

from typing import Optional

from tour.domain.model.tour import Tour
from tour.domain.repository.tour import TourRepository
from tour.domain.value import TourId


class InMemoryTourRepository(TourRepository):
    """In-memory implementation of TourRepository for testing.

    Deleting a tour does not cascade to the other in-memory repositories;
    lookups through them still fail because the tour itself is gone.
    """

    def __init__(self) -> None:
        self._tours: dict[TourId, Tour] = {}

    async def find_by_id(self, tour_id: TourId) -> Optional[Tour]:
        return self._tours.get(tour_id)

    def _matching(self, tour_ids: list[TourId], archived: bool) -> list[Tour]:
        wanted = set(tour_ids)
        matches = [
            t
            for t in self._tours.values()
            if t.id in wanted and t.is_archived == archived
        ]
        matches.sort(key=lambda t: (t.start_date, t.created_at))
        return matches

    async def find_by_ids(
        self,
        tour_ids: list[TourId],
        archived: bool,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tour]:
        return self._matching(tour_ids, archived)[offset : offset + limit]

    async def count_by_ids(self, tour_ids: list[TourId], archived: bool) -> int:
        return len(self._matching(tour_ids, archived))

    async def save(self, tour: Tour) -> Tour:
        self._tours[tour.id] = tour
        return tour

    async def delete(self, tour_id: TourId) -> bool:
        return self._tours.pop(tour_id, None) is not None
