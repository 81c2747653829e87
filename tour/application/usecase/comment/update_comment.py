"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.comment.item import CommentItem
from tour.domain.model.comment import MAX_COMMENT_LENGTH
from tour.domain.service import CommentService, TourService, UserService
from tour.domain.value import CommentId, TourId, UserId


class UpdateCommentRequest(BaseModel):
    """Request to edit one's own comment."""

    tour_id: str
    comment_id: str
    user_id: str
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for the author editing a comment."""

    def __init__(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        self.tour_service = tour_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment use case.

        Raises:
            NotFoundError: If the tour or comment does not exist, or the
                caller is not a participant
            NotAuthorizedError: If the caller did not write the comment
            BusinessRuleViolationError: If the tour is archived
        """
        tour_id = TourId(UUID(request.tour_id))
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_comment", comment_id=str(comment_id), user_id=str(user_id)
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            comment = await self.comment_service.get_comment(tour_id, comment_id)
            comment = await self.comment_service.update_comment(
                tour, comment, user_id, request.content
            )

            author = await self.user_service.get_by_id(user_id)
            return CommentItem.from_comment(comment, author, user_id)
