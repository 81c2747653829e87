"""Comment as returned to participants."""

from datetime import datetime

from pydantic import BaseModel

from tour.application.usecase.common import UserSummary
from tour.domain.model import Comment, User
from tour.domain.value import UserId


class CommentItem(BaseModel):
    """Comment with its author and whether the caller wrote it."""

    id: str
    tour_id: str
    author: UserSummary | None
    content: str
    is_author: bool
    is_edited: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(
        cls, comment: Comment, author: User | None, user_id: UserId
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            tour_id=str(comment.tour_id),
            author=UserSummary.from_user(author) if author else None,
            content=comment.content,
            is_author=comment.user_id == user_id,
            is_edited=comment.updated_at > comment.created_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
