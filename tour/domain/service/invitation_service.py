"""Invitation domain service."""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from tour.config import InvitationSettings
from tour.domain.error import (
    BusinessRuleViolationError,
    DeliveryError,
    NotAuthorizedError,
    NotFoundError,
)
from tour.domain.model import Invitation, InvitationOTP, Participant, Tour, User
from tour.domain.repository import (
    InvitationOTPRepository,
    InvitationRepository,
    ParticipantRepository,
    UserRepository,
)
from tour.domain.value import (
    Email,
    InvitationId,
    InvitationOTPId,
    InvitationStatus,
    InvitationToken,
    OTPToken,
    TourId,
    UserId,
)
from tour.util.logging import mask_email, mask_token

from .base import Service
from .email_client import EmailClient, InvitationEmail
from .invitation_permissions import InvitationPermissions

MAX_TOKEN_ATTEMPTS = 10
DEFAULT_INVITER_NAME = "A tour organizer"


class InvitationSendError(BaseModel):
    """Per-address failure in a batch send."""

    email: str
    error: str


class SendInvitationsResult(BaseModel):
    """Outcome of a batch send, partitioned by address."""

    sent: list[str] = []
    skipped: list[str] = []
    errors: list[InvitationSendError] = []


class InvitationService(Service):
    """Domain service for the invitation lifecycle.

    Owner actions (send, resend, cancel) and invitee actions (accept,
    decline, OTP verification) are enforced here. ``InvitationPermissions``
    holds the shared state rules.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        otp_repository: InvitationOTPRepository,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        email_client: EmailClient,
        invitation_settings: InvitationSettings,
        site_url: str,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            otp_repository: Invitation OTP repository
            participant_repository: Participant repository
            user_repository: User repository (inviter names)
            email_client: Outbound email client
            invitation_settings: Expiry and batch size settings
            site_url: Frontend base URL used in invitation links
        """
        self.invitation_repository = invitation_repository
        self.otp_repository = otp_repository
        self.participant_repository = participant_repository
        self.user_repository = user_repository
        self.email_client = email_client
        self.settings = invitation_settings
        self.site_url = site_url.rstrip("/")

    async def send_invitations(
        self, tour: Tour, inviter_id: UserId, emails: list[str]
    ) -> SendInvitationsResult:
        """Invite a batch of addresses to a tour.

        Addresses that already participate or already hold a pending or
        declined invitation are skipped. Failures for one address are
        collected and do not stop the batch.

        Args:
            tour: Tour to invite to
            inviter_id: Inviting user (tour owner)
            emails: Raw addresses from the request

        Returns:
            Sent, skipped and failed addresses

        Raises:
            BusinessRuleViolationError: If the tour is archived
        """
        with logfire.span(
            "invitation_service.send_invitations",
            tour_id=str(tour.id),
            inviter_id=str(inviter_id),
            count=len(emails),
        ):
            if tour.is_archived:
                raise BusinessRuleViolationError(
                    "Cannot send invitations to an archived tour. "
                    "Archived tours are read-only."
                )

            result = SendInvitationsResult()
            inviter_name = await self._get_inviter_name(inviter_id)
            participant_emails = await self.participant_repository.find_emails_by_tour(
                tour.id
            )
            blocked_emails = (
                await self.invitation_repository.find_emails_by_tour_and_status(
                    tour.id, [InvitationStatus.PENDING, InvitationStatus.DECLINED]
                )
            )

            seen: set[str] = set()
            for raw in emails:
                normalized = raw.strip().lower()
                try:
                    email = Email(normalized)
                except ValueError:
                    result.errors.append(
                        InvitationSendError(
                            email=normalized, error="Invalid email address format"
                        )
                    )
                    continue

                if (
                    email in participant_emails
                    or email in blocked_emails
                    or email.root in seen
                ):
                    result.skipped.append(email.root)
                    continue
                seen.add(email.root)

                try:
                    await self._create_and_send(tour, inviter_id, inviter_name, email)
                except (DeliveryError, BusinessRuleViolationError) as e:
                    result.errors.append(
                        InvitationSendError(email=email.root, error=str(e))
                    )
                    continue
                except Exception as e:
                    logfire.error(
                        "Unexpected error sending invitation",
                        tour_id=str(tour.id),
                        email=mask_email(email.root),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    result.errors.append(
                        InvitationSendError(
                            email=email.root, error="Failed to send invitation"
                        )
                    )
                    continue
                result.sent.append(email.root)

            logfire.info(
                "Invitations processed",
                tour_id=str(tour.id),
                sent=len(result.sent),
                skipped=len(result.skipped),
                errors=len(result.errors),
            )
            return result

    async def list_tour_invitations(
        self, tour_id: TourId, page: int = 1, limit: int = 20
    ) -> tuple[list[Invitation], int]:
        """List a tour's invitations, newest first.

        Args:
            tour_id: Tour ID
            page: 1-indexed page number
            limit: Page size

        Returns:
            Tuple of (invitations on the page, total count)
        """
        with logfire.span(
            "invitation_service.list_tour_invitations",
            tour_id=str(tour_id),
            page=page,
            limit=limit,
        ):
            offset = (page - 1) * limit
            invitations = await self.invitation_repository.find_by_tour(
                tour_id, limit=limit, offset=offset
            )
            total = await self.invitation_repository.count_by_tour(tour_id)
            return invitations, total

    async def get_user_pending_invitations(self, email: Email) -> list[Invitation]:
        """Pending, unexpired invitations addressed to ``email``."""
        with logfire.span(
            "invitation_service.get_user_pending_invitations",
            email=mask_email(email.root),
        ):
            return await self.invitation_repository.find_pending_by_email(
                email, datetime.now(timezone.utc)
            )

    async def get_invitation(self, invitation_id: InvitationId) -> Invitation:
        """Get invitation by ID.

        Raises:
            NotFoundError: If invitation not found
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            logfire.warn("Invitation not found", invitation_id=str(invitation_id))
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def get_invitation_by_token(self, token: InvitationToken) -> Invitation:
        """Get invitation by link token.

        Raises:
            NotFoundError: If no invitation carries the token
        """
        invitation = await self.invitation_repository.find_by_token(token)
        if not invitation:
            logfire.warn("Invitation not found", token=mask_token(token.root))
            raise NotFoundError("Invitation", mask_token(token.root))
        return invitation

    async def cancel_invitation(
        self, invitation: Invitation, tour: Tour, user_id: UserId
    ) -> None:
        """Withdraw an invitation by deleting it.

        Raises:
            NotAuthorizedError: If the user does not own the tour
            BusinessRuleViolationError: If the invitation was already accepted
        """
        with logfire.span(
            "invitation_service.cancel_invitation",
            invitation_id=str(invitation.id),
            user_id=str(user_id),
        ):
            self._ensure_owner("cancel", invitation, tour, user_id)
            if invitation.status == InvitationStatus.ACCEPTED:
                raise BusinessRuleViolationError(
                    "Cannot cancel an accepted invitation"
                )

            await self.invitation_repository.delete(invitation.id)
            logfire.info("Invitation cancelled", invitation_id=str(invitation.id))

    async def resend_invitation(
        self, invitation: Invitation, tour: Tour, user_id: UserId
    ) -> Invitation:
        """Reissue a declined or lapsed invitation.

        The invitation returns to pending with a new token and expiry, and a
        new OTP email is sent.

        Args:
            invitation: Invitation to resend
            tour: Tour the invitation belongs to
            user_id: Acting user

        Returns:
            Updated invitation

        Raises:
            NotAuthorizedError: If the user does not own the tour
            BusinessRuleViolationError: If the tour is archived or the
                invitation was accepted
            DeliveryError: If the email could not be sent
        """
        with logfire.span(
            "invitation_service.resend_invitation",
            invitation_id=str(invitation.id),
            user_id=str(user_id),
        ):
            self._ensure_owner("resend", invitation, tour, user_id)
            if tour.is_archived:
                raise BusinessRuleViolationError(
                    "Cannot resend invitations for an archived tour. "
                    "Archived tours are read-only."
                )
            if invitation.status == InvitationStatus.ACCEPTED:
                raise BusinessRuleViolationError("Cannot resend an accepted invitation")

            refreshed = invitation.model_copy(
                update={
                    "status": InvitationStatus.PENDING,
                    "token": await self._generate_unique_token(),
                    "expires_at": self._new_expiry(),
                }
            )
            saved = await self.invitation_repository.save(refreshed)

            inviter_name = await self._get_inviter_name(user_id)
            await self._issue_otp_and_send(saved, tour, inviter_name)

            logfire.info("Invitation resent", invitation_id=str(saved.id))
            return saved

    async def accept_invitation(
        self, invitation: Invitation, tour: Tour, user: User
    ) -> Invitation:
        """Accept an invitation and join the tour.

        Raises:
            BusinessRuleViolationError: If the invitation is not pending, has
                expired, the tour is archived, or the user already participates
            NotAuthorizedError: If the invitation was sent to another address
        """
        with logfire.span(
            "invitation_service.accept_invitation",
            invitation_id=str(invitation.id),
            user_id=str(user.id),
        ):
            self._ensure_actionable_by_invitee("accept", invitation, user)
            if tour.is_archived:
                raise BusinessRuleViolationError(
                    "Cannot accept invitation to an archived tour. "
                    "Archived tours are read-only."
                )
            if await self.participant_repository.exists(tour.id, user.id):
                raise BusinessRuleViolationError(
                    "You are already a participant in this tour"
                )

            await self.participant_repository.save(
                Participant(tour_id=tour.id, user_id=user.id, email=user.email)
            )
            accepted = await self.invitation_repository.save(
                invitation.model_copy(update={"status": InvitationStatus.ACCEPTED})
            )
            logfire.info(
                "Invitation accepted",
                invitation_id=str(invitation.id),
                tour_id=str(tour.id),
                user_id=str(user.id),
            )
            return accepted

    async def decline_invitation(self, invitation: Invitation, user: User) -> Invitation:
        """Decline an invitation.

        Raises:
            BusinessRuleViolationError: If the invitation is not pending or expired
            NotAuthorizedError: If the invitation was sent to another address
        """
        with logfire.span(
            "invitation_service.decline_invitation",
            invitation_id=str(invitation.id),
            user_id=str(user.id),
        ):
            self._ensure_actionable_by_invitee("decline", invitation, user)
            declined = await self.invitation_repository.save(
                invitation.model_copy(update={"status": InvitationStatus.DECLINED})
            )
            logfire.info("Invitation declined", invitation_id=str(invitation.id))
            return declined

    async def verify_otp(self, otp_token: str) -> InvitationOTP:
        """Consume a one-time login token from an invitation email.

        Args:
            otp_token: Token from the invitation link

        Returns:
            The consumed OTP (carries email and invitation token)

        Raises:
            BusinessRuleViolationError: If the token is unknown, used or expired
        """
        with logfire.span(
            "invitation_service.verify_otp", otp=mask_token(otp_token)
        ):
            try:
                token = OTPToken(otp_token)
            except ValueError:
                raise BusinessRuleViolationError("Invalid or expired link")

            otp = await self.otp_repository.find_by_token(token)
            if not otp or otp.used or otp.expires_at < datetime.now(timezone.utc):
                logfire.warn(
                    "OTP rejected",
                    otp=mask_token(otp_token),
                    found=otp is not None,
                    used=otp.used if otp else None,
                )
                raise BusinessRuleViolationError("Invalid or expired link")

            consumed = await self.otp_repository.save(otp.model_copy(update={"used": True}))
            logfire.info("OTP verified", email=mask_email(consumed.email.root))
            return consumed

    def _ensure_owner(
        self, action: str, invitation: Invitation, tour: Tour, user_id: UserId
    ) -> None:
        if tour.owner_id != user_id or invitation.tour_id != tour.id:
            logfire.warn(
                "Invitation action denied",
                action=action,
                invitation_id=str(invitation.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(
                action, "invitation", str(invitation.id), str(user_id)
            )

    def _ensure_actionable_by_invitee(
        self, action: str, invitation: Invitation, user: User
    ) -> None:
        if invitation.status == InvitationStatus.ACCEPTED:
            raise BusinessRuleViolationError(
                "This invitation has already been accepted"
            )
        if invitation.status != InvitationStatus.PENDING:
            raise BusinessRuleViolationError("This invitation is no longer pending")
        if InvitationPermissions.is_expired(invitation):
            raise BusinessRuleViolationError("This invitation has expired")
        if invitation.email != user.email:
            raise NotAuthorizedError(
                action, "invitation", str(invitation.id), str(user.id)
            )

    async def _get_inviter_name(self, inviter_id: UserId) -> str:
        inviter = await self.user_repository.find_by_id(inviter_id)
        if inviter and inviter.display_name:
            return inviter.display_name
        return DEFAULT_INVITER_NAME

    def _new_expiry(self) -> datetime:
        return datetime.now(timezone.utc) + timedelta(days=self.settings.expiry_days)

    async def _generate_unique_token(self) -> InvitationToken:
        """Generate a 128-bit hex token not used by any invitation.

        Raises:
            BusinessRuleViolationError: If no unique token was found
        """
        for _ in range(MAX_TOKEN_ATTEMPTS):
            token = InvitationToken(secrets.token_hex(16))
            if not await self.invitation_repository.exists_token(token):
                return token
        logfire.error("Token generation exhausted", attempts=MAX_TOKEN_ATTEMPTS)
        raise BusinessRuleViolationError("Failed to generate unique invitation token")

    async def _create_and_send(
        self, tour: Tour, inviter_id: UserId, inviter_name: str, email: Email
    ) -> Invitation:
        invitation = await self.invitation_repository.save(
            Invitation(
                id=InvitationId(uuid4()),
                tour_id=tour.id,
                inviter_id=inviter_id,
                email=email,
                token=await self._generate_unique_token(),
                expires_at=self._new_expiry(),
            )
        )
        await self._issue_otp_and_send(invitation, tour, inviter_name)
        return invitation

    async def _issue_otp_and_send(
        self, invitation: Invitation, tour: Tour, inviter_name: str
    ) -> InvitationOTP:
        """Store a fresh OTP for the invitation and email the login link.

        Raises:
            DeliveryError: If the email client reports a failure
        """
        otp = await self.otp_repository.save(
            InvitationOTP(
                id=InvitationOTPId(uuid4()),
                email=invitation.email,
                otp_token=OTPToken(secrets.token_hex(32)),
                invitation_token=invitation.token,
                expires_at=datetime.now(timezone.utc)
                + timedelta(minutes=self.settings.otp_expiry_minutes),
            )
        )

        url = (
            f"{self.site_url}/{self.settings.default_locale}"
            f"/auth/verify-invitation?otp={otp.otp_token.root}"
        )
        result = await self.email_client.send_invitation_email(
            InvitationEmail(
                to=invitation.email.root,
                tour_title=tour.title,
                inviter_name=inviter_name,
                invitation_url=url,
                expires_in_days=self.settings.expiry_days,
            )
        )
        if not result.success:
            logfire.error(
                "Invitation email failed",
                invitation_id=str(invitation.id),
                email=mask_email(invitation.email.root),
                error=result.error,
            )
            raise DeliveryError(result.error or "Failed to send invitation email")
        return otp
