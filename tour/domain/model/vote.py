"""Vote entity."""

from datetime import datetime, timezone

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import TourId, UserId


class Vote(DomainModel):
    """A participant's like for a tour. At most one per user and tour."""

    tour_id: TourId
    user_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
