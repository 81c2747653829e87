"""PostgreSQL implementation of Vote repository."""

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Vote
from tour.domain.repository import VoteRepository
from tour.domain.value import TourId, UserId
from tour.persistence.mappers import vote_to_dict
from tour.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _key(self, tour_id: TourId, user_id: UserId):
        return and_(votes_table.c.tour_id == tour_id, votes_table.c.user_id == user_id)

    async def find_user_ids_by_tour(self, tour_id: TourId) -> list[UserId]:
        stmt = (
            select(votes_table.c.user_id)
            .where(votes_table.c.tour_id == tour_id)
            .order_by(votes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [UserId(user_id) for user_id in result.scalars()]

    async def exists(self, tour_id: TourId, user_id: UserId) -> bool:
        stmt = select(votes_table.c.user_id).where(self._key(tour_id, user_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, vote: Vote) -> Vote:
        """Add a vote.

        Raises:
            IntegrityError: If the user already voted (primary key)
        """
        await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        await self.session.flush()
        return vote

    async def delete(self, tour_id: TourId, user_id: UserId) -> bool:
        result = await self.session.execute(
            delete(votes_table).where(self._key(tour_id, user_id))
        )
        await self.session.flush()
        return result.rowcount > 0
