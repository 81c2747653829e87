"""List comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.comment.item import CommentItem
from tour.application.usecase.common import Pagination
from tour.domain.service import CommentService, TourService, UserService
from tour.domain.value import TourId, UserId


class ListCommentsRequest(BaseModel):
    """Request for one page of a tour's comments."""

    tour_id: str
    user_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """One page of comments, oldest first."""

    data: list[CommentItem]
    pagination: Pagination


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading a tour's discussion."""

    def __init__(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        self.tour_service = tour_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "list_comments", tour_id=str(tour_id), user_id=str(user_id), page=request.page
        ):
            await self.tour_service.get_for_participant(tour_id, user_id)
            comments, total = await self.comment_service.list_comments(
                tour_id, page=request.page, limit=request.limit
            )
            authors = await self.user_service.get_many(
                list({c.user_id for c in comments})
            )

            return ListCommentsResponse(
                data=[
                    CommentItem.from_comment(c, authors.get(c.user_id), user_id)
                    for c in comments
                ],
                pagination=Pagination(
                    page=request.page, limit=request.limit, total=total
                ),
            )
