"""Accept invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import InvitationService, TourService, UserService
from tour.domain.value import InvitationId, UserId


class AcceptInvitationRequest(BaseModel):
    """Request to accept an invitation."""

    invitation_id: str
    user_id: str


class AcceptInvitationResponse(BaseModel):
    """Tour joined by accepting."""

    tour_id: str
    message: str = "Invitation accepted successfully"


class AcceptInvitationUseCase(BaseUseCase):
    """Use case for accepting an invitation and joining its tour."""

    def __init__(
        self,
        invitation_service: InvitationService,
        tour_service: TourService,
        user_service: UserService,
    ) -> None:
        self.invitation_service = invitation_service
        self.tour_service = tour_service
        self.user_service = user_service

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        """Execute accept invitation use case.

        Raises:
            NotFoundError: If the invitation, tour or user does not exist
            NotAuthorizedError: If the invitation was sent to another address
            BusinessRuleViolationError: If the invitation cannot be accepted
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "accept_invitation",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            user = await self.user_service.get_by_id(user_id)
            invitation = await self.invitation_service.get_invitation(invitation_id)
            tour = await self.tour_service.get_by_id(invitation.tour_id)
            await self.invitation_service.accept_invitation(invitation, tour, user)
            return AcceptInvitationResponse(tour_id=str(tour.id))
