"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tour.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from tour.domain.model import Comment, Tour
from tour.domain.model.comment import MAX_COMMENT_LENGTH
from tour.domain.repository import CommentRepository
from tour.domain.value import CommentId, TourId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for the discussion thread of a tour.

    Any participant may comment; only the author may edit or delete a
    comment. Comments on archived tours are frozen.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    def _check_content(self, content: str) -> None:
        if not content.strip():
            raise ValidationError("Comment cannot be empty")
        if len(content) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
            )

    def _ensure_open(self, tour: Tour) -> None:
        if tour.is_archived:
            raise BusinessRuleViolationError(
                "Cannot comment on an archived tour. Archived tours are read-only."
            )

    def _ensure_author(self, comment: Comment, user_id: UserId, action: str) -> None:
        if comment.user_id != user_id:
            raise NotAuthorizedError(action, "comment", str(comment.id), str(user_id))

    async def get_comment(self, tour_id: TourId, comment_id: CommentId) -> Comment:
        """Get a comment of the given tour.

        Raises:
            NotFoundError: If the comment does not exist or belongs to
                another tour
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.tour_id != tour_id:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_comments(
        self, tour_id: TourId, page: int = 1, limit: int = 50
    ) -> tuple[list[Comment], int]:
        """Page through a tour's comments, oldest first.

        Returns:
            Tuple of (comments on the page, total count)
        """
        comments = await self.comment_repository.find_by_tour(
            tour_id, limit=limit, offset=(page - 1) * limit
        )
        total = await self.comment_repository.count_by_tour(tour_id)
        return comments, total

    async def create_comment(self, tour: Tour, user_id: UserId, content: str) -> Comment:
        """Post a comment.

        Args:
            tour: Commented tour
            user_id: Author, a participant of the tour
            content: Comment text

        Returns:
            Created comment

        Raises:
            BusinessRuleViolationError: If the tour is archived
            ValidationError: If the content is blank or too long
        """
        with logfire.span(
            "comment_service.create_comment", tour_id=str(tour.id), user_id=str(user_id)
        ):
            self._ensure_open(tour)
            self._check_content(content)

            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    tour_id=tour.id,
                    user_id=user_id,
                    content=content,
                )
            )
            logfire.info(
                "Comment created", tour_id=str(tour.id), comment_id=str(comment.id)
            )
            return comment

    async def update_comment(
        self, tour: Tour, comment: Comment, user_id: UserId, content: str
    ) -> Comment:
        """Edit a comment's text.

        Raises:
            NotAuthorizedError: If ``user_id`` did not write the comment
            BusinessRuleViolationError: If the tour is archived
            ValidationError: If the content is blank or too long
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=str(comment.id)
        ):
            self._ensure_author(comment, user_id, "edit")
            self._ensure_open(tour)
            self._check_content(content)

            updated = comment.model_copy(
                update={"content": content, "updated_at": datetime.now(timezone.utc)}
            )
            await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(comment.id))
            return updated

    async def delete_comment(self, tour: Tour, comment: Comment, user_id: UserId) -> None:
        """Delete a comment.

        Raises:
            NotAuthorizedError: If ``user_id`` did not write the comment
            BusinessRuleViolationError: If the tour is archived
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment.id)
        ):
            self._ensure_author(comment, user_id, "delete")
            self._ensure_open(tour)

            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=str(comment.id))
