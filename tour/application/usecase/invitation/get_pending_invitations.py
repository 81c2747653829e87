"""Get pending invitations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.error import NotFoundError
from tour.domain.service import InvitationService, TourService, UserService
from tour.domain.value import UserId


class GetPendingInvitationsRequest(BaseModel):
    """Request for the caller's pending invitations."""

    user_id: str


class PendingInvitationItem(BaseModel):
    """Pending invitation addressed to the caller."""

    id: str
    tour_id: str
    tour_title: str | None
    token: str
    expires_at: datetime
    created_at: datetime


class GetPendingInvitationsResponse(BaseModel):
    """Pending, unexpired invitations, newest first."""

    invitations: list[PendingInvitationItem]


class GetPendingInvitationsUseCase(BaseUseCase):
    """Use case for the pending invitations indicator."""

    def __init__(
        self,
        user_service: UserService,
        tour_service: TourService,
        invitation_service: InvitationService,
    ) -> None:
        self.user_service = user_service
        self.tour_service = tour_service
        self.invitation_service = invitation_service

    async def execute(
        self, request: GetPendingInvitationsRequest
    ) -> GetPendingInvitationsResponse:
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_pending_invitations", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)
            invitations = await self.invitation_service.get_user_pending_invitations(
                user.email
            )

            items = []
            for invitation in invitations:
                try:
                    tour_title = (
                        await self.tour_service.get_by_id(invitation.tour_id)
                    ).title
                except NotFoundError:
                    tour_title = None
                items.append(
                    PendingInvitationItem(
                        id=str(invitation.id),
                        tour_id=str(invitation.tour_id),
                        tour_title=tour_title,
                        token=invitation.token.root,
                        expires_at=invitation.expires_at,
                        created_at=invitation.created_at,
                    )
                )

            return GetPendingInvitationsResponse(invitations=items)
