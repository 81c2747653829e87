"""In-memory invitation OTP repository for testing."""

from typing import Optional

from tour.domain.model.invitation_otp import InvitationOTP
from tour.domain.repository.invitation_otp import InvitationOTPRepository
from tour.domain.value import InvitationOTPId, OTPToken


class InMemoryInvitationOTPRepository(InvitationOTPRepository):
    """In-memory implementation of InvitationOTPRepository for testing."""

    def __init__(self) -> None:
        self._otps: dict[InvitationOTPId, InvitationOTP] = {}

    async def find_by_token(self, otp_token: OTPToken) -> Optional[InvitationOTP]:
        for otp in self._otps.values():
            if otp.otp_token == otp_token:
                return otp
        return None

    async def save(self, otp: InvitationOTP) -> InvitationOTP:
        self._otps[otp.id] = otp
        return otp
