"""Rate limiting domain service.

Classic fixed-window counters: each client identifier gets ``max_requests``
calls per window, after which requests are rejected until the window resets
wholesale.
"""

import ipaddress
import re
import threading
import time
from collections import deque
from typing import Any, Callable

import logfire

from tour.config import Settings
from tour.domain.repository.rate_limit import RateLimitStore
from tour.domain.value import (
    RateLimitConfig,
    RateLimitEntry,
    RateLimitMode,
    RateLimitModeInfo,
    RateLimitResult,
    RateLimitViolation,
)
from tour.domain.value.common import ValueObject

from .base import Service

MINUTE_MS = 60 * 1000

_HOSTNAME_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_HOSTNAME_PATTERN = re.compile(rf"^{_HOSTNAME_LABEL}(?:\.{_HOSTNAME_LABEL})*$")

_CLIENT_IP_HEADERS = ("x-forwarded-for", "x-real-ip", "cf-connecting-ip")


def current_time_ms() -> int:
    """Current wall clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def minutes(n: int) -> int:
    """Convert minutes to milliseconds."""
    return n * MINUTE_MS


class RateLimitConfigs(ValueObject):
    """Named limits used by the API routes.

    Build with ``RateLimitConfigs.for_settings`` so the active mode
    (production, test, development) is applied.
    """

    magic_link: RateLimitConfig
    auth: RateLimitConfig
    api: RateLimitConfig
    tour_invitations: RateLimitConfig
    otp_verification: RateLimitConfig
    invitation_resend: RateLimitConfig
    invitation_action: RateLimitConfig

    @classmethod
    def for_mode(
        cls, mode: RateLimitMode, development_multiplier: int = 10
    ) -> "RateLimitConfigs":
        """Build the named limits for a mode.

        Test mode uses production limits so CI exercises realistic behavior.

        Args:
            mode: Active rate limit mode
            development_multiplier: Factor applied to limits in development

        Returns:
            Named rate limit configurations
        """
        factor = development_multiplier if mode == RateLimitMode.DEVELOPMENT else 1

        def limit(max_requests: int, window_ms: int) -> RateLimitConfig:
            return RateLimitConfig(
                max_requests=max_requests * factor, window_ms=window_ms
            )

        return cls(
            # Magic links stay scarce even locally (20 per 15 minutes in development)
            magic_link=RateLimitConfig(
                max_requests=20 if mode == RateLimitMode.DEVELOPMENT else 3,
                window_ms=minutes(15),
            ),
            auth=limit(5, minutes(1)),
            api=limit(100, minutes(1)),
            tour_invitations=limit(10, minutes(60)),
            otp_verification=limit(10, minutes(1)),
            invitation_resend=limit(5, minutes(60)),
            invitation_action=limit(10, minutes(1)),
        )

    def by_name(self, name: str) -> RateLimitConfig:
        """Look up a limit by its label, e.g. ``TOUR_INVITATIONS``.

        Raises:
            KeyError: If no limit has that name
        """
        key = name.lower()
        if key not in type(self).model_fields:
            raise KeyError(name)
        return getattr(self, key)

    @classmethod
    def for_settings(cls, settings: Settings) -> "RateLimitConfigs":
        """Build the named limits for the configured mode."""
        mode = get_rate_limit_mode(settings).mode
        return cls.for_mode(mode, settings.rate_limit.development_multiplier)


def get_rate_limit_mode(settings: Settings) -> RateLimitModeInfo:
    """Report the active rate limit mode.

    The explicit test-mode flag wins; otherwise the environment decides.
    ``environment="test"`` also selects test mode.

    Args:
        settings: Application settings

    Returns:
        Mode information for diagnostics
    """
    test_mode = settings.rate_limit.test_mode or settings.environment == "test"
    is_development = not test_mode and settings.is_development

    if test_mode:
        mode = RateLimitMode.TEST
    elif is_development:
        mode = RateLimitMode.DEVELOPMENT
    else:
        mode = RateLimitMode.PRODUCTION

    return RateLimitModeInfo(
        mode=mode,
        test_mode_enabled=test_mode,
        is_development=is_development,
    )


def _is_plausible_address(candidate: str) -> bool:
    """Accept IPv4/IPv6 literals and hostname tokens, nothing else."""
    try:
        ipaddress.ip_address(candidate)
        return True
    except ValueError:
        pass
    return len(candidate) <= 253 and bool(_HOSTNAME_PATTERN.match(candidate))


def get_client_identifier(request: Any, user_id: str | None = None) -> str:
    """Derive the rate limit key for a request.

    Authenticated callers are limited per account. Anonymous callers are
    limited per client address taken from the first proxy header present:
    ``x-forwarded-for`` (first hop), ``x-real-ip``, then ``cf-connecting-ip``.
    Values that are not a plausible IP address or hostname collapse to
    ``unknown`` so header contents never become arbitrary keys.

    Args:
        request: Incoming request (anything exposing ``headers.get``)
        user_id: Authenticated user ID, if any

    Returns:
        ``user:<id>`` or ``ip:<address>``
    """
    if user_id:
        return f"user:{user_id}"

    candidate = ""
    for header in _CLIENT_IP_HEADERS:
        value = request.headers.get(header)
        if not value:
            continue
        if header == "x-forwarded-for":
            value = value.split(",")[0]
        candidate = value.strip()
        if candidate:
            break

    if not candidate or not _is_plausible_address(candidate):
        candidate = "unknown"

    return f"ip:{candidate}"


class RateLimitService(Service):
    """Fixed-window rate limiter over a pluggable store.

    One instance is shared by all requests of a process. The read-modify-write
    of a counter happens under a lock because the store may also be touched by
    its background sweep thread.
    """

    def __init__(
        self,
        store: RateLimitStore,
        configs: RateLimitConfigs,
        clock: Callable[[], int] = current_time_ms,
        metrics_buffer_size: int = 1000,
    ) -> None:
        """Initialize rate limit service.

        Args:
            store: Entry store
            configs: Named limits for the active mode
            clock: Source of epoch milliseconds
            metrics_buffer_size: Capacity of the violation buffer
        """
        self.store = store
        self.configs = configs
        self._clock = clock
        self._violations: deque[RateLimitViolation] = deque(
            maxlen=metrics_buffer_size
        )
        self._lock = threading.Lock()

    def check_rate_limit(
        self, identifier: str, config: RateLimitConfig, label: str | None = None
    ) -> RateLimitResult:
        """Count a request and decide whether it may proceed.

        Rejected requests are not counted: the counter saturates at
        ``max_requests`` until the window resets.

        Args:
            identifier: Client identifier (see ``get_client_identifier``)
            config: Limit to apply
            label: Name of the limit, recorded on violations

        Returns:
            Whether the request is allowed, remaining calls and window reset time
        """
        with self._lock:
            now = self._clock()
            entry = self.store.get(identifier, now)

            if entry is None:
                reset_at = now + config.window_ms
                self.store.set(identifier, RateLimitEntry(count=1, reset_at=reset_at))
                return RateLimitResult(
                    allowed=True,
                    remaining=config.max_requests - 1,
                    reset_at=reset_at,
                )

            if entry.count >= config.max_requests:
                config_name = label or "custom"
                self._violations.append(
                    RateLimitViolation(
                        identifier=identifier, config=config_name, timestamp=now
                    )
                )
                logfire.warn(
                    "Rate limit exceeded",
                    identifier=identifier,
                    config=config_name,
                    max_requests=config.max_requests,
                    window_ms=config.window_ms,
                    reset_at=entry.reset_at,
                )
                return RateLimitResult(
                    allowed=False,
                    remaining=0,
                    reset_at=entry.reset_at,
                )

            updated = RateLimitEntry(count=entry.count + 1, reset_at=entry.reset_at)
            self.store.set(identifier, updated)
            return RateLimitResult(
                allowed=True,
                remaining=config.max_requests - updated.count,
                reset_at=updated.reset_at,
            )

    def reset_rate_limit(self, identifier: str) -> None:
        """Forget the window of an identifier (manual override, tests)."""
        with self._lock:
            self.store.delete(identifier)
        logfire.info("Rate limit reset", identifier=identifier)

    def get_violations(self) -> list[RateLimitViolation]:
        """Snapshot of recorded violations, oldest first."""
        with self._lock:
            return list(self._violations)

    def retry_after_seconds(self, result: RateLimitResult) -> int:
        """Whole seconds until the window of ``result`` resets (never negative)."""
        remaining_ms = result.reset_at - self._clock()
        return max(0, -(-remaining_ms // 1000))

    def destroy(self) -> None:
        """Release the store (stops its sweep) and clear recorded violations."""
        with self._lock:
            self.store.destroy()
            self._violations.clear()
        logfire.info("Rate limit store destroyed")
