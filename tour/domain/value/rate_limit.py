"""Rate limiting value objects.

All timestamps are integer milliseconds since the epoch.
"""

from enum import Enum

from pydantic import Field

from tour.domain.value.common import ValueObject


class RateLimitMode(str, Enum):
    """Which family of limits is active."""

    PRODUCTION = "production"
    TEST = "test"
    DEVELOPMENT = "development"


class RateLimitConfig(ValueObject):
    """Fixed-window limit: at most ``max_requests`` per ``window_ms``."""

    max_requests: int = Field(gt=0)
    window_ms: int = Field(gt=0)


class RateLimitResult(ValueObject):
    """Outcome of a single rate limit check."""

    allowed: bool
    remaining: int
    reset_at: int


class RateLimitEntry(ValueObject):
    """Counter for one identifier within its current window."""

    count: int = Field(ge=0)
    reset_at: int


class RateLimitViolation(ValueObject):
    """Record of a rejected request, kept for diagnostics."""

    identifier: str
    config: str
    timestamp: int


class RateLimitModeInfo(ValueObject):
    """Diagnostic view of the active rate limit mode."""

    mode: RateLimitMode
    test_mode_enabled: bool
    is_development: bool
