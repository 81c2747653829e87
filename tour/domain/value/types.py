"""Domain value objects for the tour planner.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from tour.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_HEX_PATTERN = re.compile(r"^[0-9a-f]+$")


class InvitationStatus(str, Enum):
    """Stored status of an invitation.

    Expiry is not a status: it is derived from ``expires_at`` on every check.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class TourStatus(str, Enum):
    """Lifecycle status of a tour. Archived tours are read-only."""

    PLANNING = "planning"
    CONFIRMED = "confirmed"
    ARCHIVED = "archived"


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase without surrounding whitespace."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        normalized = v.strip().lower()
        if len(normalized) > 254 or not _EMAIL_PATTERN.match(normalized):
            raise ValueError("Invalid email address format")
        return normalized


class InvitationToken(RootValueObject[str]):
    """Invitation link token (32-64 characters)."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token length."""
        if len(v) < 32 or len(v) > 64:
            raise ValueError("Invitation token must be 32-64 characters")
        return v


class OTPToken(RootValueObject[str]):
    """One-time passwordless login token (64 lowercase hex characters)."""

    @field_validator("root")
    @classmethod
    def validate_otp_format(cls, v: str) -> str:
        """Validate OTP is a 64 character hex string."""
        if len(v) != 64 or not _HEX_PATTERN.match(v):
            raise ValueError("OTP token must be 64 hexadecimal characters")
        return v
