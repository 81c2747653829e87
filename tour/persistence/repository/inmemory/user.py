"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from tour.domain.model.user import User
from tour.domain.repository.user import UserRepository
from tour.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """Users by id with a unique email index, like the ``users`` table."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids_by_email: dict[str, UserId] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        user_id = self._ids_by_email.get(email.root)
        return self._users.get(user_id) if user_id else None

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def save(self, user: User) -> User:
        holder = self._ids_by_email.get(user.email.root)
        if holder and holder != user.id:
            raise IntegrityError("Duplicate email", None, Exception())

        previous = self._users.get(user.id)
        if previous and previous.email != user.email:
            del self._ids_by_email[previous.email.root]
        self._users[user.id] = user
        self._ids_by_email[user.email.root] = user.id
        return user
