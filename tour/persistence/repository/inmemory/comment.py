"""In-memory comment repository for testing."""

from typing import Optional

from tour.domain.model.comment import Comment
from tour.domain.repository.comment import CommentRepository
from tour.domain.value import CommentId, TourId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        matches = [c for c in self._comments.values() if c.tour_id == tour_id]
        matches.sort(key=lambda c: c.created_at)
        return matches[offset : offset + limit]

    async def count_by_tour(self, tour_id: TourId) -> int:
        return sum(1 for c in self._comments.values() if c.tour_id == tour_id)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        return self._comments.pop(comment_id, None) is not None
