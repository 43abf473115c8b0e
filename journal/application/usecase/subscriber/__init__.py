"""Newsletter use cases."""

from .list_subscribers import ListSubscribersUseCase
from .subscribe import (
    ListSubscribersResponse,
    SubscribeRequest,
    SubscribeResponse,
    SubscriberItem,
    SubscribeUseCase,
)

__all__ = [
    "ListSubscribersResponse",
    "ListSubscribersUseCase",
    "SubscribeRequest",
    "SubscribeResponse",
    "SubscriberItem",
    "SubscribeUseCase",
]
