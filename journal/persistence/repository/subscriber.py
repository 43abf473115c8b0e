"""PostgreSQL implementation of Subscriber repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.domain.error import AlreadySubscribedError, StoreUnavailableError
from journal.domain.model import Subscriber
from journal.domain.repository import SubscriberRepository
from journal.domain.value import Email
from journal.persistence.mappers import row_to_subscriber, subscriber_to_dict
from journal.persistence.tables import subscribers_table


class PostgresSubscriberRepository(SubscriberRepository):
    """PostgreSQL implementation of SubscriberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: Email) -> Optional[Subscriber]:
        """Find a subscriber by email."""
        stmt = select(subscribers_table).where(subscribers_table.c.email == email.root)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("find_by_email", str(e)) from e
        row = result.fetchone()
        return row_to_subscriber(row._asdict()) if row else None

    async def find_all(self) -> List[Subscriber]:
        """List subscribers, newest first."""
        stmt = select(subscribers_table).order_by(
            desc(subscribers_table.c.subscribed_at)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("find_all_subscribers", str(e)) from e
        return [row_to_subscriber(row._asdict()) for row in result.fetchall()]

    async def save(self, subscriber: Subscriber) -> Subscriber:
        """Insert a new subscriber.

        Raises:
            AlreadySubscribedError: If the email was inserted concurrently
            StoreUnavailableError: If the store cannot be written
        """
        stmt = subscribers_table.insert().values(**subscriber_to_dict(subscriber))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise AlreadySubscribedError(subscriber.email.root) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError("save_subscriber", str(e)) from e
        return subscriber
