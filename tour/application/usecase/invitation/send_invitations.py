"""Send invitations use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.config import InvitationSettings
from tour.domain.error import NotAuthorizedError, ValidationError
from tour.domain.service import InvitationService, TourService
from tour.domain.service.invitation_service import InvitationSendError
from tour.domain.value import TourId, UserId


class SendInvitationsRequest(BaseModel):
    """Request to invite addresses to a tour."""

    tour_id: str
    user_id: str
    emails: list[str] = Field(min_length=1)


class SendInvitationsResponse(BaseModel):
    """Per-address outcome of the batch."""

    sent: list[str]
    skipped: list[str]
    errors: list[InvitationSendError]


class SendInvitationsUseCase(BaseUseCase):
    """Use case for inviting a batch of email addresses to a tour."""

    def __init__(
        self,
        tour_service: TourService,
        invitation_service: InvitationService,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize use case.

        Args:
            tour_service: Tour domain service
            invitation_service: Invitation domain service
            invitation_settings: Invitation settings (batch size limit)
        """
        self.tour_service = tour_service
        self.invitation_service = invitation_service
        self.invitation_settings = invitation_settings

    async def execute(self, request: SendInvitationsRequest) -> SendInvitationsResponse:
        """Execute send invitations use case.

        Args:
            request: Send invitations request

        Returns:
            Sent, skipped and failed addresses

        Raises:
            ValidationError: If the batch exceeds the configured maximum
            NotFoundError: If the tour does not exist
            NotAuthorizedError: If the caller does not own the tour
            BusinessRuleViolationError: If the tour is archived
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "send_invitations",
            tour_id=str(tour_id),
            user_id=str(user_id),
            count=len(request.emails),
        ):
            limit = self.invitation_settings.max_emails_per_request
            if len(request.emails) > limit:
                raise ValidationError(
                    f"Cannot send more than {limit} invitations at once"
                )

            tour = await self.tour_service.get_by_id(tour_id)
            if not self.tour_service.is_owner(tour, user_id):
                raise NotAuthorizedError(
                    "invite to", "tour", str(tour_id), str(user_id)
                )

            result = await self.invitation_service.send_invitations(
                tour, user_id, request.emails
            )
            return SendInvitationsResponse(
                sent=result.sent, skipped=result.skipped, errors=result.errors
            )
