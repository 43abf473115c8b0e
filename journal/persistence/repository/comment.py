"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.domain.error import StoreUnavailableError
from journal.domain.model import Comment
from journal.domain.repository import CommentRepository
from journal.domain.value import CommentId, PostSlug
from journal.persistence.mappers import comment_to_dict, row_to_comment
from journal.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("find_by_id", str(e)) from e
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_slug: PostSlug) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_slug == post_slug.root)
            .order_by(asc(comments_table.c.created_at))
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("find_by_post", str(e)) from e
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Comment]:
        """Find all comments, newest first."""
        stmt = select(comments_table).order_by(desc(comments_table.c.created_at))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("find_all", str(e)) from e
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreUnavailableError("save", str(e)) from e
        return comment

    async def set_approved(self, comment_id: CommentId) -> Optional[Comment]:
        """Set approved = true and return the updated comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(approved=True)
            .returning(comments_table)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreUnavailableError("set_approved", str(e)) from e
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreUnavailableError("delete", str(e)) from e
        return result.rowcount > 0
