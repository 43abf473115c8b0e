"""Subscriber repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from journal.domain.model.subscriber import Subscriber
from journal.domain.value import Email


class SubscriberRepository(ABC):
    """Repository for newsletter subscribers."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Subscriber]:
        """Find a subscriber by (normalized) email.

        Args:
            email: Email address

        Returns:
            The subscriber if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Subscriber]:
        """List subscribers, newest first."""
        pass

    @abstractmethod
    async def save(self, subscriber: Subscriber) -> Subscriber:
        """Create a subscriber.

        Args:
            subscriber: Subscriber to store

        Returns:
            The stored subscriber
        """
        pass
