"""Invitation entity.

Invitations are email-addressed, tokenized offers to join a tour.
"""

from datetime import datetime, timezone

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TourId,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Lifecycle:
    - Created as pending with a fresh token and expiry
    - pending -> accepted / declined by the invitee through the token
    - declined, or pending past its expiry -> pending again on resend
      (new token, new expiry)
    - Deleted when the owner cancels it

    Expiry is derived from ``expires_at`` on each check, never stored.
    """

    id: InvitationId
    tour_id: TourId
    inviter_id: UserId
    email: Email
    status: InvitationStatus = InvitationStatus.PENDING
    token: InvitationToken
    expires_at: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
