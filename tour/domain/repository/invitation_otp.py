"""Invitation OTP repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.invitation_otp import InvitationOTP
from tour.domain.value import OTPToken


class InvitationOTPRepository(ABC):
    """Repository for one-time invitation login tokens."""

    @abstractmethod
    async def find_by_token(self, otp_token: OTPToken) -> InvitationOTP | None:
        """Find an OTP by its token value."""
        pass

    @abstractmethod
    async def save(self, otp: InvitationOTP) -> InvitationOTP:
        """Save an OTP (create or update)."""
        pass
