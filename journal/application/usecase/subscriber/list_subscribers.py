"""List newsletter subscribers use case."""

from journal.application.usecase.base import require_moderator
from journal.application.usecase.subscriber.subscribe import (
    ListSubscribersResponse,
    SubscriberItem,
)
from journal.domain.service import SubscriberService
from journal.domain.value import ModeratorSession


class ListSubscribersUseCase:
    """Use case for the admin subscriber list."""

    def __init__(self, subscriber_service: SubscriberService) -> None:
        """Initialize list subscribers use case.

        Args:
            subscriber_service: Subscriber domain service
        """
        self.subscriber_service = subscriber_service

    async def execute(self, session: ModeratorSession | None) -> ListSubscribersResponse:
        """Execute list subscribers flow.

        Raises:
            NotAuthorizedError: If no moderator session was given
        """
        require_moderator(session, "view subscribers")

        subscribers = await self.subscriber_service.list_subscribers()
        return ListSubscribersResponse(
            subscribers=[
                SubscriberItem(
                    subscriber_id=str(s.id),
                    email=str(s.email),
                    subscribed_at=s.subscribed_at,
                    source=s.source,
                    verified=s.verified,
                    unsubscribed=s.unsubscribed,
                )
                for s in subscribers
            ],
            total=len(subscribers),
        )
