"""Tour activity entity."""

from datetime import datetime

from tour.domain.model.common import DomainModel
from tour.domain.value import TourId, UserId


class TourActivity(DomainModel):
    """When a participant last opened a tour."""

    tour_id: TourId
    user_id: UserId
    last_viewed_at: datetime
