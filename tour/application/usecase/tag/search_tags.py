"""Search tags use case."""

from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.tag.item import TagItem, TagListResponse
from tour.domain.service import TagService


class SearchTagsRequest(BaseModel):
    """Tag autocomplete; an empty query lists tags alphabetically."""

    query: str = Field(default="", max_length=50)
    limit: int = Field(default=10, ge=1, le=50)


class SearchTagsUseCase(BaseUseCase):
    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: SearchTagsRequest) -> TagListResponse:
        tags = await self.tag_service.search(request.query, limit=request.limit)
        return TagListResponse(data=[TagItem.from_tag(tag) for tag in tags])
