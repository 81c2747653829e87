"""Tag entity."""

from pydantic import Field

from tour.domain.model.common import DomainModel
from tour.domain.value import TagId

MAX_TAG_LENGTH = 50


class Tag(DomainModel):
    """Label shared across tours.

    Names are unique ignoring case; the spelling used first is kept.
    """

    id: TagId
    name: str = Field(min_length=1, max_length=MAX_TAG_LENGTH)
