"""PostgreSQL implementation of Tour repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Tour
from tour.domain.repository import TourRepository
from tour.domain.value import TourId, TourStatus
from tour.persistence.mappers import row_to_tour, tour_to_dict
from tour.persistence.tables import tours_table


class PostgresTourRepository(TourRepository):
    """PostgreSQL implementation of TourRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, tour_id: TourId) -> Optional[Tour]:
        stmt = select(tours_table).where(tours_table.c.id == tour_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tour(dict(row)) if row else None

    @staticmethod
    def _membership_filter(tour_ids: list[TourId], archived: bool):
        if archived:
            status_filter = tours_table.c.status == TourStatus.ARCHIVED.value
        else:
            status_filter = tours_table.c.status != TourStatus.ARCHIVED.value
        return and_(tours_table.c.id.in_(tour_ids), status_filter)

    async def find_by_ids(
        self,
        tour_ids: list[TourId],
        archived: bool,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Tour]:
        if not tour_ids:
            return []
        stmt = (
            select(tours_table)
            .where(self._membership_filter(tour_ids, archived))
            .order_by(tours_table.c.start_date.asc(), tours_table.c.created_at.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_tour(dict(row)) for row in result.mappings()]

    async def count_by_ids(self, tour_ids: list[TourId], archived: bool) -> int:
        if not tour_ids:
            return 0
        stmt = (
            select(func.count())
            .select_from(tours_table)
            .where(self._membership_filter(tour_ids, archived))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, tour: Tour) -> Tour:
        tour_dict = tour_to_dict(tour)

        if await self.find_by_id(tour.id):
            stmt = (
                update(tours_table)
                .where(tours_table.c.id == tour.id)
                .values(**tour_dict)
            )
        else:
            stmt = insert(tours_table).values(**tour_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return tour

    async def delete(self, tour_id: TourId) -> bool:
        """Delete a tour; dependent rows go with it (ON DELETE CASCADE)."""
        stmt = delete(tours_table).where(tours_table.c.id == tour_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
