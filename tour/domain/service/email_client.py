"""Outbound email interface used by the invitation flow."""

from pydantic import BaseModel


class InvitationEmail(BaseModel):
    """Content of an invitation email."""

    to: str
    tour_title: str
    inviter_name: str
    invitation_url: str
    expires_in_days: int


class EmailResult(BaseModel):
    """Outcome of a delivery attempt."""

    success: bool
    error: str | None = None


class EmailClient:
    """Generic email client interface for all providers."""

    async def send_invitation_email(self, email: InvitationEmail) -> EmailResult:
        """Send an invitation email.

        Delivery problems are reported in the result rather than raised, so
        one failing address does not abort a batch.

        Args:
            email: Message content

        Returns:
            Delivery result
        """
        raise NotImplementedError
