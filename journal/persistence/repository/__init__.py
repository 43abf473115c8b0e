"""PostgreSQL repository implementations."""

from journal.persistence.repository.comment import PostgresCommentRepository
from journal.persistence.repository.subscriber import PostgresSubscriberRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresSubscriberRepository",
]
