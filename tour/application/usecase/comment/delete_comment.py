"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import CommentService, TourService
from tour.domain.value import CommentId, TourId, UserId


class DeleteCommentRequest(BaseModel):
    tour_id: str
    comment_id: str
    user_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for the author deleting a comment."""

    def __init__(
        self, tour_service: TourService, comment_service: CommentService
    ) -> None:
        self.tour_service = tour_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        tour_id = TourId(UUID(request.tour_id))
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "delete_comment", comment_id=str(comment_id), user_id=str(user_id)
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            comment = await self.comment_service.get_comment(tour_id, comment_id)
            await self.comment_service.delete_comment(tour, comment, user_id)
