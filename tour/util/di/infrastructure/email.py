"""Email infrastructure providers."""

from dishka import Scope, provide
import logfire

from tour.adapter.email import HttpEmailClient, MockEmailClient
from tour.config import Settings
from tour.domain.service import EmailClient
from tour.util.di.base import ProviderBase
from tour.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: Settings) -> EmailClient:
        """Provide email client.

        Local development without a provider key records emails in memory.

        Raises:
            ConfigurationError: If the API key is missing outside development
        """
        if not settings.email.api_key:
            if settings.is_development:
                logfire.warn("Email API key not configured, using mock email client")
                return MockEmailClient()
            raise ConfigurationError("email.api_key", "must be set outside development")

        return HttpEmailClient(settings=settings.email)
