"""Invitation permission rules.

Decides which owner actions an invitation currently supports. The UI uses
these to pick which buttons to render; ``InvitationService`` enforces the
same rules server-side, so this module is never the security boundary.
"""

from datetime import datetime, timezone

from pydantic import BaseModel

from tour.domain.model.invitation import Invitation
from tour.domain.value import InvitationStatus


class InvitationActions(BaseModel):
    """Owner actions available for an invitation."""

    can_cancel: bool
    can_resend: bool
    can_remove: bool


class InvitationPermissions:
    """Pure predicates over an invitation snapshot and caller ownership.

    Every predicate accepts an optional ``now``; when omitted the current UTC
    time is read. Nothing here raises or performs I/O.
    """

    @staticmethod
    def is_expired(invitation: Invitation, now: datetime | None = None) -> bool:
        """Return True once ``expires_at`` lies strictly in the past.

        An invitation expiring exactly at ``now`` is still valid.
        """
        now = now or datetime.now(timezone.utc)
        return invitation.expires_at < now

    @staticmethod
    def can_cancel(
        invitation: Invitation, is_owner: bool, now: datetime | None = None
    ) -> bool:
        """Only live invitations can be withdrawn, and only by the owner."""
        if not is_owner:
            return False
        return (
            invitation.status == InvitationStatus.PENDING
            and not InvitationPermissions.is_expired(invitation, now)
        )

    @staticmethod
    def can_resend(
        invitation: Invitation, is_owner: bool, now: datetime | None = None
    ) -> bool:
        """Declined invitations and lapsed pending ones can be sent again."""
        if not is_owner:
            return False
        if invitation.status == InvitationStatus.DECLINED:
            return True
        return (
            invitation.status == InvitationStatus.PENDING
            and InvitationPermissions.is_expired(invitation, now)
        )

    @staticmethod
    def can_remove(
        invitation: Invitation, is_owner: bool, now: datetime | None = None
    ) -> bool:
        # Same rule as resend
        return InvitationPermissions.can_resend(invitation, is_owner, now)

    @staticmethod
    def get_available_actions(
        invitation: Invitation, is_owner: bool, now: datetime | None = None
    ) -> InvitationActions:
        """Evaluate all actions against a single instant.

        Args:
            invitation: Invitation snapshot
            is_owner: Whether the caller owns the invitation's tour
            now: Evaluation instant (defaults to current UTC time)

        Returns:
            Flags for cancel, resend and remove
        """
        now = now or datetime.now(timezone.utc)
        return InvitationActions(
            can_cancel=InvitationPermissions.can_cancel(invitation, is_owner, now),
            can_resend=InvitationPermissions.can_resend(invitation, is_owner, now),
            can_remove=InvitationPermissions.can_remove(invitation, is_owner, now),
        )
