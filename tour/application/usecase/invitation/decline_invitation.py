"""Decline invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import InvitationService, UserService
from tour.domain.value import InvitationId, UserId


class DeclineInvitationRequest(BaseModel):
    """Request to decline an invitation."""

    invitation_id: str
    user_id: str


class DeclineInvitationResponse(BaseModel):
    """Tour whose invitation was declined."""

    tour_id: str
    message: str = "Invitation declined successfully"


class DeclineInvitationUseCase(BaseUseCase):
    """Use case for declining an invitation."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: DeclineInvitationRequest
    ) -> DeclineInvitationResponse:
        invitation_id = InvitationId(UUID(request.invitation_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "decline_invitation",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            user = await self.user_service.get_by_id(user_id)
            invitation = await self.invitation_service.get_invitation(invitation_id)
            declined = await self.invitation_service.decline_invitation(invitation, user)
            return DeclineInvitationResponse(tour_id=str(declined.tour_id))
