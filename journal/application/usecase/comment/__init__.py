"""Comment use cases."""

from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .items import CommentItem, CommentNodeItem
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
