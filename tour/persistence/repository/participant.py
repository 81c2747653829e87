"""PostgreSQL implementation of Participant repository."""

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Participant
from tour.domain.repository import ParticipantRepository
from tour.domain.value import Email, TourId, UserId
from tour.persistence.mappers import participant_to_dict, row_to_participant
from tour.persistence.tables import participants_table


class PostgresParticipantRepository(ParticipantRepository):
    """PostgreSQL implementation of ParticipantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        stmt = select(participants_table.c.user_id).where(
            and_(
                participants_table.c.tour_id == tour_id,
                participants_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_emails_by_tour(self, tour_id: TourId) -> set[Email]:
        stmt = select(participants_table.c.email).where(
            participants_table.c.tour_id == tour_id
        )
        result = await self.session.execute(stmt)
        return {Email(email) for email in result.scalars()}

    async def find_by_tour(self, tour_id: TourId) -> list[Participant]:
        stmt = (
            select(participants_table)
            .where(participants_table.c.tour_id == tour_id)
            .order_by(participants_table.c.joined_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_participant(dict(row)) for row in result.mappings()]

    async def save(self, participant: Participant) -> Participant:
        """Add a participant.

        Raises:
            IntegrityError: If the user already participates (primary key)
        """
        stmt = insert(participants_table).values(**participant_to_dict(participant))
        await self.session.execute(stmt)
        await self.session.flush()
        return participant

    async def find_tour_ids_by_user(self, user_id: UserId) -> list[TourId]:
        stmt = select(participants_table.c.tour_id).where(
            participants_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return [TourId(tour_id) for tour_id in result.scalars()]

    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        stmt = delete(participants_table).where(
            and_(
                participants_table.c.tour_id == tour_id,
                participants_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
