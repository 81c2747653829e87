"""User entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import Email, UserId


class User(DomainModel):
    """Registered user.

    Accounts are passwordless: they are created the first time an invitee
    verifies an invitation OTP sent to their email address.
    """

    id: UserId
    email: Email
    display_name: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
