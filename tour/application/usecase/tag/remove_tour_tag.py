"""Remove tour tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TagService, TourService
from tour.domain.value import TagId, TourId, UserId


class RemoveTourTagRequest(BaseModel):
    tour_id: str
    user_id: str
    tag_id: int


class RemoveTourTagUseCase(BaseUseCase):
    """Use case for a participant untagging an archived tour."""

    def __init__(self, tour_service: TourService, tag_service: TagService) -> None:
        self.tour_service = tour_service
        self.tag_service = tag_service

    async def execute(self, request: RemoveTourTagRequest) -> None:
        """Execute remove tour tag use case.

        Raises:
            NotFoundError: If the tour does not exist, the caller is not a
                participant, or the tag is not on the tour
            BusinessRuleViolationError: If the tour is not archived
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "remove_tour_tag", tour_id=str(tour_id), tag_id=request.tag_id
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            await self.tag_service.remove_tag(tour, TagId(request.tag_id))
