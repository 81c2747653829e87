"""Verify invitation OTP use case."""

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import InvitationService, JWTService, UserService
from tour.util.logging import mask_email


class VerifyInvitationOTPRequest(BaseModel):
    """Request carrying the OTP from an invitation link."""

    otp: str


class VerifyInvitationOTPResponse(BaseModel):
    """Signed-in invitee and the invitation to act on."""

    invitation_token: str
    user_id: str
    email: str
    is_new_user: bool
    session_token: str


class VerifyInvitationOTPUseCase(BaseUseCase):
    """Use case for passwordless sign-in through an invitation link.

    Consumes the OTP, creates the account on first use and issues a session
    token. The caller is then redirected to the invitation page.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: VerifyInvitationOTPRequest
    ) -> VerifyInvitationOTPResponse:
        """Execute verify invitation OTP use case.

        Raises:
            BusinessRuleViolationError: If the OTP is unknown, used or expired
        """
        with logfire.span("verify_invitation_otp"):
            otp = await self.invitation_service.verify_otp(request.otp)
            user, created = await self.user_service.get_or_create_by_email(otp.email)
            session_token = self.jwt_service.create_token(str(user.id), user.email.root)

            logfire.info(
                "Invitee signed in",
                user_id=str(user.id),
                email=mask_email(user.email.root),
                is_new_user=created,
            )
            return VerifyInvitationOTPResponse(
                invitation_token=otp.invitation_token.root,
                user_id=str(user.id),
                email=user.email.root,
                is_new_user=created,
                session_token=session_token,
            )
