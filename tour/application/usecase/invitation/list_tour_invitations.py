"""List tour invitations use case."""

from datetime import datetime, timezone
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.common import Pagination
from tour.domain.error import NotAuthorizedError
from tour.domain.model import Invitation
from tour.domain.service import InvitationService, TourService
from tour.domain.service.invitation_permissions import (
    InvitationActions,
    InvitationPermissions,
)
from tour.domain.value import InvitationStatus, TourId, UserId


class ListTourInvitationsRequest(BaseModel):
    """Request for one page of a tour's invitations."""

    tour_id: str
    user_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class InvitationItem(BaseModel):
    """Invitation as seen by the tour owner."""

    id: str
    tour_id: str
    inviter_id: str
    email: str
    status: InvitationStatus
    is_expired: bool
    expires_at: datetime
    created_at: datetime
    actions: InvitationActions

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, is_owner: bool, now: datetime
    ) -> "InvitationItem":
        return cls(
            id=str(invitation.id),
            tour_id=str(invitation.tour_id),
            inviter_id=str(invitation.inviter_id),
            email=invitation.email.root,
            status=invitation.status,
            is_expired=InvitationPermissions.is_expired(invitation, now),
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
            actions=InvitationPermissions.get_available_actions(
                invitation, is_owner, now
            ),
        )


class ListTourInvitationsResponse(BaseModel):
    """One page of invitations, newest first."""

    data: list[InvitationItem]
    pagination: Pagination


class ListTourInvitationsUseCase(BaseUseCase):
    """Use case for listing a tour's invitations with the owner's actions."""

    def __init__(
        self, tour_service: TourService, invitation_service: InvitationService
    ) -> None:
        self.tour_service = tour_service
        self.invitation_service = invitation_service

    async def execute(
        self, request: ListTourInvitationsRequest
    ) -> ListTourInvitationsResponse:
        """Execute list tour invitations use case.

        Raises:
            NotFoundError: If the tour does not exist
            NotAuthorizedError: If the caller does not own the tour
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "list_tour_invitations",
            tour_id=str(tour_id),
            user_id=str(user_id),
            page=request.page,
        ):
            tour = await self.tour_service.get_by_id(tour_id)
            is_owner = self.tour_service.is_owner(tour, user_id)
            if not is_owner:
                raise NotAuthorizedError(
                    "list invitations of", "tour", str(tour_id), str(user_id)
                )

            invitations, total = await self.invitation_service.list_tour_invitations(
                tour_id, page=request.page, limit=request.limit
            )

            now = datetime.now(timezone.utc)
            return ListTourInvitationsResponse(
                data=[
                    InvitationItem.from_invitation(inv, is_owner, now)
                    for inv in invitations
                ],
                pagination=Pagination(
                    page=request.page, limit=request.limit, total=total
                ),
            )
