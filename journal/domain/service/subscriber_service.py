"""Newsletter subscriber domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from journal.domain.error import AlreadySubscribedError, ValidationError
from journal.domain.model import Subscriber
from journal.domain.repository import SubscriberRepository
from journal.domain.value import Email, SubscriberId

from .base import Service


class SubscriberService(Service):
    """Domain service for newsletter subscriptions."""

    def __init__(self, subscriber_repository: SubscriberRepository) -> None:
        """Initialize subscriber service.

        Args:
            subscriber_repository: Subscriber repository
        """
        self.subscriber_repository = subscriber_repository

    async def subscribe(self, email: str, source: str = "website") -> Subscriber:
        """Add an email to the newsletter list.

        Args:
            email: Raw email address (trimmed and lower-cased here)
            source: Where the subscription came from

        Returns:
            Created subscriber

        Raises:
            ValidationError: If the address is malformed or too long
            AlreadySubscribedError: If the address is already subscribed
        """
        with logfire.span("subscriber_service.subscribe", source=source):
            try:
                normalized = Email(email)
            except PydanticValidationError as e:
                error = e.errors()[0]
                raise ValidationError(
                    str(error.get("ctx", {}).get("error") or error["msg"])
                ) from e

            existing = await self.subscriber_repository.find_by_email(normalized)
            if existing:
                logfire.info("Duplicate subscription rejected")
                raise AlreadySubscribedError(normalized.root)

            subscriber = Subscriber(
                id=SubscriberId(uuid4()),
                email=normalized,
                subscribed_at=datetime.now(),
                source=source,
                verified=False,
                unsubscribed=False,
            )
            saved = await self.subscriber_repository.save(subscriber)
            logfire.info("Subscriber added", subscriber_id=str(saved.id))
            return saved

    async def list_subscribers(self) -> list[Subscriber]:
        """List all subscribers, newest first."""
        with logfire.span("subscriber_service.list_subscribers"):
            subscribers = await self.subscriber_repository.find_all()
            logfire.info("Subscribers retrieved", count=len(subscribers))
            return subscribers
