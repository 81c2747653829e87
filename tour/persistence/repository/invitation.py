"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import Invitation
from tour.domain.repository import InvitationRepository
from tour.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TourId,
)
from tour.persistence.mappers import invitation_to_dict, row_to_invitation
from tour.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def exists_token(self, token: InvitationToken) -> bool:
        stmt = select(invitations_table.c.id).where(
            invitations_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Invitation]:
        """Find invitations of a tour, newest first.

        Args:
            tour_id: Tour ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.tour_id == tour_id)
            .order_by(invitations_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def count_by_tour(self, tour_id: TourId) -> int:
        stmt = (
            select(func.count())
            .select_from(invitations_table)
            .where(invitations_table.c.tour_id == tour_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_emails_by_tour_and_status(
        self, tour_id: TourId, statuses: list[InvitationStatus]
    ) -> set[Email]:
        stmt = select(invitations_table.c.email).where(
            and_(
                invitations_table.c.tour_id == tour_id,
                invitations_table.c.status.in_([s.value for s in statuses]),
            )
        )
        result = await self.session.execute(stmt)
        return {Email(email) for email in result.scalars()}

    async def find_pending_by_email(
        self, email: Email, not_expired_at: datetime
    ) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.email == email.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at > not_expired_at,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If the token is already used by another invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)
        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: InvitationId) -> bool:
        stmt = delete(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
