"""Mock persistence providers for testing."""

from dishka import Scope, provide

from journal.domain.repository import CommentRepository, SubscriberRepository
from journal.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemorySubscriberRepository,
)
from journal.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope: the records live as long as the container, so requests made
    through one test client see each other's writes. Every test builds its
    own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_subscriber_repository(self) -> SubscriberRepository:
        """Provide in-memory subscriber repository."""
        return InMemorySubscriberRepository()
