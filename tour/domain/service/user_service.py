"""User domain service."""

from uuid import uuid4

import logfire

from tour.domain.error import NotFoundError
from tour.domain.model import User
from tour.domain.repository import UserRepository
from tour.domain.value import Email, UserId
from tour.util.logging import mask_email

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Users by ID; unknown IDs are left out."""
        if not user_ids:
            return {}
        return await self.user_repository.find_by_ids(user_ids)

    async def get_or_create_by_email(self, email: Email) -> tuple[User, bool]:
        """Find the account for an address, creating it on first sign-in.

        Args:
            email: Verified email address

        Returns:
            Tuple of (user, created)
        """
        with logfire.span(
            "user_service.get_or_create_by_email", email=mask_email(email.root)
        ):
            user = await self.user_repository.find_by_email(email)
            if user:
                return user, False

            user = await self.user_repository.save(
                User(id=UserId(uuid4()), email=email)
            )
            logfire.info(
                "User created", user_id=str(user.id), email=mask_email(email.root)
            )
            return user, True
