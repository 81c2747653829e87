"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import User
from tour.domain.repository import UserRepository
from tour.domain.value import Email, UserId
from tour.persistence.mappers import row_to_user, user_to_dict
from tour.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users keyed by id; the lowercased email is unique."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(*criteria))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        return await self._find_one(users_table.c.email == email.root)

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        if not user_ids:
            return {}
        result = await self.session.execute(
            select(users_table).where(users_table.c.id.in_(user_ids))
        )
        users = [row_to_user(dict(row)) for row in result.mappings()]
        return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Insert the user or update its profile fields.

        Raises:
            IntegrityError: If another user already has the email address
        """
        values = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={"email": values["email"], "display_name": values["display_name"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
