"""PostgreSQL implementation of InvitationOTP repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tour.domain.model import InvitationOTP
from tour.domain.repository import InvitationOTPRepository
from tour.domain.value import OTPToken
from tour.persistence.mappers import invitation_otp_to_dict, row_to_invitation_otp
from tour.persistence.tables import invitation_otps_table


class PostgresInvitationOTPRepository(InvitationOTPRepository):
    """PostgreSQL implementation of InvitationOTPRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_token(self, otp_token: OTPToken) -> Optional[InvitationOTP]:
        stmt = select(invitation_otps_table).where(
            invitation_otps_table.c.otp_token == otp_token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation_otp(dict(row)) if row else None

    async def save(self, otp: InvitationOTP) -> InvitationOTP:
        otp_dict = invitation_otp_to_dict(otp)

        stmt = select(invitation_otps_table.c.id).where(
            invitation_otps_table.c.id == otp.id
        )
        exists = (await self.session.execute(stmt)).first() is not None

        if exists:
            await self.session.execute(
                update(invitation_otps_table)
                .where(invitation_otps_table.c.id == otp.id)
                .values(**otp_dict)
            )
        else:
            await self.session.execute(insert(invitation_otps_table).values(**otp_dict))

        await self.session.flush()
        return otp
