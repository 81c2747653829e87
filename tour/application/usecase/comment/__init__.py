"""Comment use cases."""

from tour.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from tour.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from tour.application.usecase.comment.item import CommentItem
from tour.application.usecase.comment.list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from tour.application.usecase.comment.update_comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
