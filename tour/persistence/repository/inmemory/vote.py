"""In-memory vote repository for testing."""

from sqlalchemy.exc import IntegrityError

from tour.domain.model.vote import Vote
from tour.domain.repository.vote import VoteRepository
from tour.domain.value import TourId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[TourId, UserId], Vote] = {}

    async def find_user_ids_by_tour(self, tour_id: TourId) -> list[UserId]:
        votes = [v for v in self._votes.values() if v.tour_id == tour_id]
        votes.sort(key=lambda v: v.created_at)
        return [v.user_id for v in votes]

    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        return (tour_id, user_id) in self._votes

    async def save(self, vote: Vote) -> Vote:
        key = (vote.tour_id, vote.user_id)
        if key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes[key] = vote
        return vote

    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        return self._votes.pop((tour_id, user_id), None) is not None
