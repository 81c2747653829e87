"""List tour tags use case."""

from uuid import UUID

from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tag.item import TagItem, TagListResponse
from tour.domain.service import TagService, TourService
from tour.domain.value import TourId, UserId


class ListTourTagsRequest(BaseModel):
    tour_id: str
    user_id: str


class ListTourTagsUseCase(BaseUseCase):
    """Use case for listing a tour's tags by name."""

    def __init__(self, tour_service: TourService, tag_service: TagService) -> None:
        self.tour_service = tour_service
        self.tag_service = tag_service

    async def execute(self, request: ListTourTagsRequest) -> TagListResponse:
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        await self.tour_service.get_for_participant(tour_id, user_id)
        tags = await self.tag_service.list_tour_tags(tour_id)
        return TagListResponse(data=[TagItem.from_tag(tag) for tag in tags])
