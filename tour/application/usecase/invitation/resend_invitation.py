"""Resend invitation use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import InvitationService, TourService
from tour.domain.value import InvitationId, InvitationStatus, UserId


class ResendInvitationRequest(BaseModel):
    """Request to reissue an invitation."""

    invitation_id: str
    user_id: str


class ResendInvitationResponse(BaseModel):
    """Reissued invitation."""

    invitation_id: str
    status: InvitationStatus
    expires_at: datetime
    message: str = "Invitation resent successfully"


class ResendInvitationUseCase(BaseUseCase):
    """Use case for resending a declined or expired invitation."""

    def __init__(
        self, invitation_service: InvitationService, tour_service: TourService
    ) -> None:
        self.invitation_service = invitation_service
        self.tour_service = tour_service

    async def execute(self, request: ResendInvitationRequest) -> ResendInvitationResponse:
        """Execute resend invitation use case.

        Raises:
            NotFoundError: If the invitation or its tour does not exist
            NotAuthorizedError: If the caller does not own the tour
            BusinessRuleViolationError: If the tour is archived or the
                invitation was accepted
            DeliveryError: If the email could not be sent
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "resend_invitation",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.invitation_service.get_invitation(invitation_id)
            tour = await self.tour_service.get_by_id(invitation.tour_id)
            resent = await self.invitation_service.resend_invitation(
                invitation, tour, user_id
            )
            return ResendInvitationResponse(
                invitation_id=str(resent.id),
                status=resent.status,
                expires_at=resent.expires_at,
            )
