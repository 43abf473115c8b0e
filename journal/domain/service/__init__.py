"""Domain services."""

from .base import Service
from .comment_service import CommentService, DeletePreview, DeleteResult
from .content_service import ContentClient, ContentService
from .session_service import SessionService
from .subscriber_service import SubscriberService

__all__ = [
    "CommentService",
    "ContentClient",
    "ContentService",
    "DeletePreview",
    "DeleteResult",
    "Service",
    "SessionService",
    "SubscriberService",
]
