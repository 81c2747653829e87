"""Invitation OTP entity."""

from datetime import datetime, timezone

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import Email, InvitationOTPId, InvitationToken, OTPToken


class InvitationOTP(DomainModel):
    """One-time token embedded in an invitation email.

    Verifying it signs the invitee in (creating the account if needed)
    and hands back the invitation token to accept or decline.
    """

    id: InvitationOTPId
    email: Email
    otp_token: OTPToken
    invitation_token: InvitationToken
    expires_at: datetime
    used: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
