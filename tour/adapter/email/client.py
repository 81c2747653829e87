"""Email provider clients.

``HttpEmailClient`` posts JSON to a transactional email HTTP API
(Resend-compatible payload). ``MockEmailClient`` keeps messages in memory.
"""

from html import escape

import httpx
import logfire

from tour.adapter.error import EmailDeliveryError
from tour.config import EmailSettings
from tour.domain.service.email_client import EmailClient, EmailResult, InvitationEmail
from tour.util.logging import mask_email


def render_invitation_html(email: InvitationEmail) -> str:
    """Render the HTML body of an invitation email."""
    return (
        f"<p>{escape(email.inviter_name)} invited you to join "
        f"<strong>{escape(email.tour_title)}</strong>.</p>"
        f'<p><a href="{escape(email.invitation_url, quote=True)}">'
        "Accept invitation</a></p>"
        f"<p>This invitation expires in {email.expires_in_days} days. "
        "The sign-in link in this email is valid for one hour.</p>"
    )


def render_invitation_text(email: InvitationEmail) -> str:
    """Render the plain text body of an invitation email."""
    return (
        f"{email.inviter_name} invited you to join {email.tour_title}.\n\n"
        f"Accept the invitation: {email.invitation_url}\n\n"
        f"This invitation expires in {email.expires_in_days} days."
    )


class HttpEmailClient(EmailClient):
    """Email client for an HTTP transactional email provider."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize HTTP email client.

        Args:
            settings: Provider endpoint, API key and sender
        """
        self.settings = settings

    async def send_invitation_email(self, email: InvitationEmail) -> EmailResult:
        """Send an invitation email through the provider.

        Args:
            email: Message content

        Returns:
            Delivery result (failures are reported, not raised)
        """
        with logfire.span("email_client.send_invitation_email", to=mask_email(email.to)):
            try:
                await self._post(
                    {
                        "from": self.settings.sender,
                        "to": [email.to],
                        "subject": f"You're invited to join {email.tour_title}",
                        "html": render_invitation_html(email),
                        "text": render_invitation_text(email),
                    }
                )
            except EmailDeliveryError as e:
                return EmailResult(success=False, error=str(e))

            logfire.info("Invitation email sent", to=mask_email(email.to))
            return EmailResult(success=True)

    async def _post(self, payload: dict) -> None:
        """POST a message to the provider.

        Raises:
            EmailDeliveryError: If the request fails or is rejected
        """
        if not self.settings.api_key:
            raise EmailDeliveryError("Email provider API key is not configured")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.settings.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.settings.api_key}"},
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Email provider HTTP error", error=str(e))
            raise EmailDeliveryError(f"HTTP error sending email: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Email provider rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            raise EmailDeliveryError(
                f"Email provider returned {response.status_code}",
                status_code=response.status_code,
            )


class MockEmailClient(EmailClient):
    """Email client for tests and local development.

    Records every message instead of sending it. Set ``fail_for`` to make
    deliveries to specific addresses fail.
    """

    def __init__(self) -> None:
        self.sent: list[InvitationEmail] = []
        self.fail_for: set[str] = set()

    async def send_invitation_email(self, email: InvitationEmail) -> EmailResult:
        if email.to in self.fail_for:
            return EmailResult(success=False, error="Mock delivery failure")
        self.sent.append(email)
        logfire.info(
            "Mock invitation email recorded",
            to=mask_email(email.to),
            tour_title=email.tour_title,
        )
        return EmailResult(success=True)

    def last_otp(self) -> str | None:
        """OTP of the most recently recorded invitation link."""
        if not self.sent:
            return None
        return self.sent[-1].invitation_url.rsplit("otp=", 1)[-1]
