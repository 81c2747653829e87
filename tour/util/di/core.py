"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tour.config import (
    AuthSettings,
    CSRFSettings,
    EmailSettings,
    InvitationSettings,
    RateLimitSettings,
    Settings,
)
from tour.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Sections are exposed individually so services depend only on what they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limit

    @provide
    def provide_csrf_settings(self, settings: Settings) -> CSRFSettings:
        return settings.csrf
