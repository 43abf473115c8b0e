"""Subscribe to newsletter use case."""

from datetime import datetime

from pydantic import BaseModel

from journal.domain.service import SubscriberService


class SubscribeRequest(BaseModel):
    """Subscribe request."""

    email: str


class SubscribeResponse(BaseModel):
    """Subscribe response."""

    message: str
    subscriber_id: str


class SubscribeUseCase:
    """Use case for joining the newsletter."""

    def __init__(self, subscriber_service: SubscriberService) -> None:
        """Initialize subscribe use case.

        Args:
            subscriber_service: Subscriber domain service
        """
        self.subscriber_service = subscriber_service

    async def execute(self, request: SubscribeRequest) -> SubscribeResponse:
        """Execute subscribe flow.

        Raises:
            ValidationError: If the email is malformed or too long
            AlreadySubscribedError: If the email is already subscribed
        """
        subscriber = await self.subscriber_service.subscribe(request.email)
        return SubscribeResponse(
            message="Successfully subscribed to newsletter",
            subscriber_id=str(subscriber.id),
        )


class SubscriberItem(BaseModel):
    """Subscriber in the admin list."""

    subscriber_id: str
    email: str
    subscribed_at: datetime
    source: str
    verified: bool
    unsubscribed: bool


class ListSubscribersResponse(BaseModel):
    """List subscribers response."""

    subscribers: list[SubscriberItem]
    total: int
