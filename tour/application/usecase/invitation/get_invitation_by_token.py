"""Get invitation by token use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.error import NotFoundError
from tour.domain.service import InvitationService, TourService, UserService
from tour.domain.service.invitation_permissions import InvitationPermissions
from tour.domain.value import InvitationStatus, InvitationToken, TourStatus
from tour.util.logging import mask_token


class GetInvitationByTokenRequest(BaseModel):
    """Request for the public view of an invitation."""

    token: str


class GetInvitationByTokenResponse(BaseModel):
    """What an invitee sees before accepting or declining."""

    id: str
    tour_id: str
    tour_title: str
    tour_status: TourStatus
    inviter_email: str | None
    inviter_display_name: str | None
    email: str
    status: InvitationStatus
    expires_at: datetime
    is_expired: bool


class GetInvitationByTokenUseCase(BaseUseCase):
    """Use case for resolving an invitation link.

    Only pending invitations resolve; any other status reads as not found.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        tour_service: TourService,
        user_service: UserService,
    ) -> None:
        self.invitation_service = invitation_service
        self.tour_service = tour_service
        self.user_service = user_service

    async def execute(
        self, request: GetInvitationByTokenRequest
    ) -> GetInvitationByTokenResponse:
        """Execute get invitation by token use case.

        Raises:
            NotFoundError: If the token is malformed, unknown or not pending
        """
        with logfire.span("get_invitation_by_token", token=mask_token(request.token)):
            try:
                token = InvitationToken(request.token)
            except ValueError:
                raise NotFoundError("Invitation", mask_token(request.token))

            invitation = await self.invitation_service.get_invitation_by_token(token)
            if invitation.status != InvitationStatus.PENDING:
                raise NotFoundError("Invitation", mask_token(request.token))

            tour = await self.tour_service.get_by_id(invitation.tour_id)
            try:
                inviter = await self.user_service.get_by_id(invitation.inviter_id)
            except NotFoundError:
                inviter = None

            return GetInvitationByTokenResponse(
                id=str(invitation.id),
                tour_id=str(tour.id),
                tour_title=tour.title,
                tour_status=tour.status,
                inviter_email=inviter.email.root if inviter else None,
                inviter_display_name=inviter.display_name if inviter else None,
                email=invitation.email.root,
                status=invitation.status,
                expires_at=invitation.expires_at,
                is_expired=InvitationPermissions.is_expired(invitation),
            )
