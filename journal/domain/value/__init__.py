"""Domain value objects for the journal."""

from journal.domain.value.identifiers import CommentId, SubscriberId
from journal.domain.value.types import (
    AuthorName,
    CommentStatus,
    Email,
    ModeratorSession,
    PostSlug,
)

__all__ = [
    # Identifiers
    "CommentId",
    "SubscriberId",
    # Types
    "AuthorName",
    "CommentStatus",
    "Email",
    "ModeratorSession",
    "PostSlug",
]
