"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import UserService
from tour.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    user_id: str


class GetCurrentUserResponse(BaseModel):
    """The signed-in account."""

    user_id: str
    email: str
    display_name: str | None
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Resolves a session to its account.

    Raises:
        NotFoundError: If the account behind the session no longer exists
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse(
            user_id=str(user.id),
            email=user.email.root,
            display_name=user.display_name,
            created_at=user.created_at,
        )
