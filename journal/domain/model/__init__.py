"""Domain model entities for the journal."""

from journal.domain.model.comment import Comment
from journal.domain.model.post import BlogPost
from journal.domain.model.subscriber import Subscriber

__all__ = [
    "BlogPost",
    "Comment",
    "Subscriber",
]
