"""Comment entity."""

from datetime import datetime, timezone

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import CommentId, TourId, UserId

MAX_COMMENT_LENGTH = 5000


class Comment(DomainModel):
    """A participant's message on a tour.

    Only the author may edit or delete it, and only while the tour is not
    archived.
    """

    id: CommentId
    tour_id: TourId
    user_id: UserId
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
