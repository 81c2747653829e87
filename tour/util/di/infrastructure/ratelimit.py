"""Rate limiting infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide
import logfire

from tour.config import RateLimitSettings, Settings
from tour.domain.repository import RateLimitStore
from tour.domain.service import (
    RateLimitConfigs,
    RateLimitService,
    current_time_ms,
    get_rate_limit_mode,
)
from tour.persistence.repository.inmemory import InMemoryRateLimitStore
from tour.util.di.base import ProviderBase


class RateLimitProvider(ProviderBase):
    """Rate limit component base."""

    __mock_component__ = "ratelimit"


class ProdRateLimitProvider(RateLimitProvider):
    """Production rate limit provider.

    Counters live in process memory with a periodic sweep, so limits are
    per instance.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_rate_limit_configs(self, settings: Settings) -> RateLimitConfigs:
        """Provide named limits for the active mode."""
        info = get_rate_limit_mode(settings)
        logfire.info(
            "Rate limit mode selected",
            mode=info.mode.value,
            test_mode_enabled=info.test_mode_enabled,
            is_development=info.is_development,
        )
        return RateLimitConfigs.for_settings(settings)

    @provide
    def get_rate_limit_store(self, rate_limit_settings: RateLimitSettings) -> RateLimitStore:
        """Provide in-memory store with background sweep."""
        return InMemoryRateLimitStore(
            clock=current_time_ms,
            sweep_interval_seconds=rate_limit_settings.sweep_interval_seconds,
        )

    @provide
    def get_rate_limit_service(
        self,
        store: RateLimitStore,
        configs: RateLimitConfigs,
        rate_limit_settings: RateLimitSettings,
    ) -> Iterator[RateLimitService]:
        """Provide the process-wide rate limiter, destroyed with the container."""
        service = RateLimitService(
            store=store,
            configs=configs,
            metrics_buffer_size=rate_limit_settings.metrics_buffer_size,
        )
        yield service
        service.destroy()
