"""Tour entity."""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from tour.domain.model.common import DomainModel
from tour.domain.value import TourId, TourStatus, UserId


class Tour(DomainModel):
    """A planned trip with an owner, a date range and participants.

    Business rules:
    - Only participants can see a tour; only the owner can edit, delete,
      invite or lock voting
    - Archived tours are read-only: no edits, invitations, votes or comments.
      Tags are the exception: they are only added once a trip is archived

    ``updated_at`` moves on every edit, vote and comment and drives the
    "new activity" marker of the tour list.
    """

    id: TourId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=255)
    destination: Optional[str] = None
    description: Optional[str] = None
    start_date: date
    end_date: date
    status: TourStatus = TourStatus.PLANNING
    voting_locked: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def check_date_range(self) -> "Tour":
        """End date must not precede start date."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self

    @property
    def is_archived(self) -> bool:
        return self.status == TourStatus.ARCHIVED
