"""PostgreSQL implementation of TourActivity repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import TourActivity
from tour.domain.repository import TourActivityRepository
from tour.domain.value import TourId, UserId
from tour.persistence.mappers import row_to_tour_activity, tour_activity_to_dict
from tour.persistence.tables import tour_activity_table


class PostgresTourActivityRepository(TourActivityRepository):
    """PostgreSQL implementation of TourActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user(self, user_id: UserId) -> dict[TourId, TourActivity]:
        stmt = select(tour_activity_table).where(
            tour_activity_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        records = [row_to_tour_activity(dict(row)) for row in result.mappings()]
        return {record.tour_id: record for record in records}

    async def save(self, activity: TourActivity) -> TourActivity:
        stmt = (
            insert(tour_activity_table)
            .values(**tour_activity_to_dict(activity))
            .on_conflict_do_update(
                index_elements=[
                    tour_activity_table.c.tour_id,
                    tour_activity_table.c.user_id,
                ],
                set_={"last_viewed_at": activity.last_viewed_at},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return activity
