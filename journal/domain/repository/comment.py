"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from journal.domain.model.comment import Comment
from journal.domain.value import CommentId, PostSlug


class CommentRepository(ABC):
    """Repository for Comment entity.

    The store keeps comments as flat records. It has no notion of threads,
    so it never cascades deletes on its own.

    Implementations raise ``StoreUnavailableError`` when the store cannot
    be reached.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_slug: PostSlug) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_slug: The post identifier

        Returns:
            Comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find all comments across all posts, newest first.

        Returns:
            Comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment.

        Args:
            comment: The comment to create

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def set_approved(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment as approved.

        Args:
            comment_id: The comment ID

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete, no cascade).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a record was removed, False if it was already gone
        """
        pass
