"""In-memory participant repository for testing."""

from sqlalchemy.exc import IntegrityError

from tour.domain.model.participant import Participant
from tour.domain.repository.participant import ParticipantRepository
from tour.domain.value import Email, TourId, UserId


class InMemoryParticipantRepository(ParticipantRepository):
    """In-memory implementation of ParticipantRepository for testing."""

    def __init__(self) -> None:
        self._participants: list[Participant] = []

    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        return any(
            p.tour_id == tour_id and p.user_id == user_id for p in self._participants
        )

    async def find_emails_by_tour(self, tour_id: TourId) -> set[Email]:
        return {p.email for p in self._participants if p.tour_id == tour_id}

    async def find_by_tour(self, tour_id: TourId) -> list[Participant]:
        matches = [p for p in self._participants if p.tour_id == tour_id]
        matches.sort(key=lambda p: p.joined_at)
        return matches

    async def save(self, participant: Participant) -> Participant:
        """Add a participant.

        Raises:
            IntegrityError: If the user already participates in the tour
        """
        if await self.exists(participant.tour_id, participant.user_id):
            raise IntegrityError("Duplicate participant", None, Exception())
        self._participants.append(participant)
        return participant

    async def find_tour_ids_by_user(self, user_id: UserId) -> list[TourId]:
        return [p.tour_id for p in self._participants if p.user_id == user_id]

    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        remaining = [
            p
            for p in self._participants
            if not (p.tour_id == tour_id and p.user_id == user_id)
        ]
        removed = len(remaining) < len(self._participants)
        self._participants = remaining
        return removed
