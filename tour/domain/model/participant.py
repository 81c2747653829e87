"""Participant entity."""

from datetime import datetime, timezone

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import Email, TourId, UserId


class Participant(DomainModel):
    """Membership of a user in a tour."""

    tour_id: TourId
    user_id: UserId
    email: Email
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
