"""Add tour tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tag.item import TagItem
from tour.domain.service import TagService, TourService
from tour.domain.value import TourId, UserId


class AddTourTagRequest(BaseModel):
    """Request to tag an archived tour; the tag is created if new."""

    tour_id: str
    user_id: str
    # Whitespace is trimmed before the length is checked
    tag_name: str = Field(min_length=1, max_length=100)


class AddTourTagUseCase(BaseUseCase):
    """Use case for a participant tagging an archived tour."""

    def __init__(self, tour_service: TourService, tag_service: TagService) -> None:
        self.tour_service = tour_service
        self.tag_service = tag_service

    async def execute(self, request: AddTourTagRequest) -> TagItem:
        """Execute add tour tag use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
            BusinessRuleViolationError: If the tour is not archived
            ValidationError: If the trimmed name is empty or too long
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("add_tour_tag", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            tag = await self.tag_service.add_tag(tour, request.tag_name)
            return TagItem.from_tag(tag)
