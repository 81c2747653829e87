"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.comment.item import CommentItem
from tour.domain.model.comment import MAX_COMMENT_LENGTH
from tour.domain.service import CommentService, TourService, UserService
from tour.domain.value import TourId, UserId


class CreateCommentRequest(BaseModel):
    """Request to post a comment on a tour."""

    tour_id: str
    user_id: str
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


class CreateCommentUseCase(BaseUseCase):
    """Use case for a participant posting a comment."""

    def __init__(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        self.tour_service = tour_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
            BusinessRuleViolationError: If the tour is archived
            ValidationError: If the content is blank
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("create_comment", tour_id=str(tour_id), user_id=str(user_id)):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            comment = await self.comment_service.create_comment(
                tour, user_id, request.content
            )
            await self.tour_service.touch(tour)

            author = await self.user_service.get_by_id(user_id)
            return CommentItem.from_comment(comment, author, user_id)
