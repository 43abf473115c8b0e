"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .subscriber import InMemorySubscriberRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemorySubscriberRepository",
]
