"""User repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.user import User
from tour.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by email address."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find users by ID; unknown IDs are left out of the result."""
        pass
