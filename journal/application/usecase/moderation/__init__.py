"""Moderation use cases."""

from .approve_comment import (
    ApproveCommentRequest,
    ApproveCommentResponse,
    ApproveCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    PreviewDeleteRequest,
    PreviewDeleteResponse,
    PreviewDeleteUseCase,
)
from .list_comments import (
    ListAllCommentsResponse,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
)
from .reply_to_comment import (
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from .view import ModerationViewRequest, ModerationViewResponse

__all__ = [
    "ApproveCommentRequest",
    "ApproveCommentResponse",
    "ApproveCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListAllCommentsResponse",
    "ListAllCommentsUseCase",
    "ListCommentsUseCase",
    "ModerationViewRequest",
    "ModerationViewResponse",
    "PreviewDeleteRequest",
    "PreviewDeleteResponse",
    "PreviewDeleteUseCase",
    "ReplyToCommentRequest",
    "ReplyToCommentResponse",
    "ReplyToCommentUseCase",
]
