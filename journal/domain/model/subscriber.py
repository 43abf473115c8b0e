"""Newsletter subscriber entity."""

from datetime import datetime

from pydantic import Field

from journal.domain.model.common import DomainModel
from journal.domain.value import Email, SubscriberId


class Subscriber(DomainModel):
    """Newsletter subscriber."""

    id: SubscriberId
    email: Email
    subscribed_at: datetime = Field(default_factory=datetime.now)
    source: str = "website"  # Where the subscription came from
    verified: bool = False  # Email verification not implemented yet
    unsubscribed: bool = False
