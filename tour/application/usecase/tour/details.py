"""Tour as returned to its participants."""

from datetime import date, datetime

from pydantic import BaseModel

from tour.domain.model import Tour
from tour.domain.value import TourStatus, UserId


class TourDetails(BaseModel):
    """Tour fields plus whether the caller owns it."""

    tour_id: str
    owner_id: str
    title: str
    destination: str | None
    description: str | None
    start_date: date
    end_date: date
    status: TourStatus
    voting_locked: bool
    is_owner: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tour(cls, tour: Tour, user_id: UserId) -> "TourDetails":
        return cls(
            tour_id=str(tour.id),
            owner_id=str(tour.owner_id),
            title=tour.title,
            destination=tour.destination,
            description=tour.description,
            start_date=tour.start_date,
            end_date=tour.end_date,
            status=tour.status,
            voting_locked=tour.voting_locked,
            is_owner=tour.owner_id == user_id,
            created_at=tour.created_at,
            updated_at=tour.updated_at,
        )
