"""Comment repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.comment import Comment
from tour.domain.value import CommentId, TourId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Comment | None:
        pass

    @abstractmethod
    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Find comments of a tour, oldest first.

        Args:
            tour_id: Tour ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_by_tour(self, tour_id: TourId) -> int:
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if deleted, False if not found
        """
        pass
