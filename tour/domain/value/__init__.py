"""Domain value objects for the tour planner."""

from tour.domain.value.identifiers import (
    CommentId,
    InvitationId,
    InvitationOTPId,
    TagId,
    TourId,
    UserId,
)
from tour.domain.value.rate_limit import (
    RateLimitConfig,
    RateLimitEntry,
    RateLimitMode,
    RateLimitModeInfo,
    RateLimitResult,
    RateLimitViolation,
)
from tour.domain.value.types import (
    Email,
    InvitationStatus,
    InvitationToken,
    OTPToken,
    TourStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "TourId",
    "InvitationId",
    "InvitationOTPId",
    "CommentId",
    "TagId",
    # Types
    "Email",
    "InvitationStatus",
    "InvitationToken",
    "OTPToken",
    "TourStatus",
    # Rate limiting
    "RateLimitConfig",
    "RateLimitEntry",
    "RateLimitMode",
    "RateLimitModeInfo",
    "RateLimitResult",
    "RateLimitViolation",
]
