"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tour.domain.model.invitation import Invitation
from tour.domain.repository.invitation import InvitationRepository
from tour.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TourId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def exists_token(self, token: InvitationToken) -> bool:
        return await self.find_by_token(token) is not None

    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Invitation]:
        matches = [i for i in self._invitations.values() if i.tour_id == tour_id]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def count_by_tour(self, tour_id: TourId) -> int:
        return sum(1 for i in self._invitations.values() if i.tour_id == tour_id)

    async def find_emails_by_tour_and_status(
        self, tour_id: TourId, statuses: list[InvitationStatus]
    ) -> set[Email]:
        return {
            i.email
            for i in self._invitations.values()
            if i.tour_id == tour_id and i.status in statuses
        }

    async def find_pending_by_email(
        self, email: Email, not_expired_at: datetime
    ) -> list[Invitation]:
        matches = [
            i
            for i in self._invitations.values()
            if i.email == email
            and i.status == InvitationStatus.PENDING
            and i.expires_at > not_expired_at
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already uses the token
        """
        holder = await self.find_by_token(invitation.token)
        if holder and holder.id != invitation.id:
            raise IntegrityError("Duplicate invitation token", None, Exception())

        self._invitations[invitation.id] = invitation
        return invitation

    async def delete(self, invitation_id: InvitationId) -> bool:
        return self._invitations.pop(invitation_id, None) is not None
