"""In-memory subscriber repository for testing."""

from typing import Optional

from journal.domain.model.subscriber import Subscriber
from journal.domain.repository.subscriber import SubscriberRepository
from journal.domain.value import Email


class InMemorySubscriberRepository(SubscriberRepository):
    """In-memory implementation of SubscriberRepository for testing."""

    def __init__(self) -> None:
        self._subscribers: dict[str, Subscriber] = {}

    async def find_by_email(self, email: Email) -> Optional[Subscriber]:
        """Find a subscriber by email."""
        return self._subscribers.get(email.root)

    async def find_all(self) -> list[Subscriber]:
        """List subscribers, newest first."""
        return sorted(
            self._subscribers.values(), key=lambda s: s.subscribed_at, reverse=True
        )

    async def save(self, subscriber: Subscriber) -> Subscriber:
        """Store a subscriber."""
        self._subscribers[subscriber.email.root] = subscriber
        return subscriber
