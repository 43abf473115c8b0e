"""Repository interfaces for the journal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from journal.domain.repository.comment import CommentRepository
from journal.domain.repository.subscriber import SubscriberRepository

__all__ = [
    "CommentRepository",
    "SubscriberRepository",
]
