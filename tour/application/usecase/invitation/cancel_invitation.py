"""Cancel invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import InvitationService, TourService
from tour.domain.value import InvitationId, UserId


class CancelInvitationRequest(BaseModel):
    """Request to withdraw an invitation."""

    invitation_id: str
    user_id: str


class CancelInvitationResponse(BaseModel):
    """Confirmation of a cancelled invitation."""

    invitation_id: str
    message: str = "Invitation cancelled successfully"


class CancelInvitationUseCase(BaseUseCase):
    """Use case for cancelling (deleting) an invitation."""

    def __init__(
        self, invitation_service: InvitationService, tour_service: TourService
    ) -> None:
        self.invitation_service = invitation_service
        self.tour_service = tour_service

    async def execute(self, request: CancelInvitationRequest) -> CancelInvitationResponse:
        """Execute cancel invitation use case.

        Raises:
            NotFoundError: If the invitation or its tour does not exist
            NotAuthorizedError: If the caller does not own the tour
            BusinessRuleViolationError: If the invitation was accepted
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "cancel_invitation",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.invitation_service.get_invitation(invitation_id)
            tour = await self.tour_service.get_by_id(invitation.tour_id)
            await self.invitation_service.cancel_invitation(invitation, tour, user_id)
            return CancelInvitationResponse(invitation_id=str(invitation_id))
