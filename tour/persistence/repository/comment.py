"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Comment
from tour.domain.repository import CommentRepository
from tour.domain.value import CommentId, TourId
from tour.persistence.mappers import comment_to_dict, row_to_comment
from tour.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.tour_id == tour_id)
            .order_by(comments_table.c.created_at.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def count_by_tour(self, tour_id: TourId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.tour_id == tour_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        comment_dict = comment_to_dict(comment)

        if await self.find_by_id(comment.id):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(content=comment.content, updated_at=comment.updated_at)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
