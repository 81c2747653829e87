"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Tag
from tour.domain.repository import TagRepository
from tour.domain.value import TagId, TourId
from tour.persistence.mappers import row_to_tag
from tour.persistence.tables import tags_table, tour_tags_table


class PostgresTagRepository(TagRepository):
    """Tags with a case-insensitive unique name, linked to tours."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_or_create(self, name: str) -> Tag:
        """Return the tag named ``name`` ignoring case, creating it if needed.

        An existing name (in any case) hits the ``lower(name)`` unique index
        and the insert is skipped; the select then returns the stored row.
        """
        await self.session.execute(
            insert(tags_table).values(name=name).on_conflict_do_nothing()
        )
        result = await self.session.execute(
            select(tags_table).where(
                func.lower(tags_table.c.name) == func.lower(name)
            )
        )
        return row_to_tag(dict(result.mappings().one()))

    async def search(self, prefix: str, limit: int = 10) -> list[Tag]:
        stmt = select(tags_table).order_by(tags_table.c.name).limit(limit)
        if prefix:
            escaped = (
                prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            )
            stmt = stmt.where(tags_table.c.name.ilike(f"{escaped}%", escape="\\"))
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings()]

    async def find_by_tour(self, tour_id: TourId) -> list[Tag]:
        stmt = (
            select(tags_table)
            .join(tour_tags_table, tour_tags_table.c.tag_id == tags_table.c.id)
            .where(tour_tags_table.c.tour_id == tour_id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings()]

    async def add_to_tour(self, tour_id: TourId, tag_id: TagId) -> None:
        await self.session.execute(
            insert(tour_tags_table)
            .values(tour_id=tour_id, tag_id=tag_id)
            .on_conflict_do_nothing()
        )
        await self.session.flush()

    async def remove_from_tour(self, tour_id: TourId, tag_id: TagId) -> bool:
        result = await self.session.execute(
            delete(tour_tags_table).where(
                and_(
                    tour_tags_table.c.tour_id == tour_id,
                    tour_tags_table.c.tag_id == tag_id,
                )
            )
        )
        await self.session.flush()
        return result.rowcount > 0
