"""In-memory comment repository for testing."""

from typing import Optional

from journal.domain.model.comment import Comment
from journal.domain.repository.comment import CommentRepository
from journal.domain.value import CommentId, PostSlug


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        # Every delete call in order, including ones for missing records
        self.delete_calls: list[CommentId] = []

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_slug: PostSlug) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_slug == post_slug]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_all(self) -> list[Comment]:
        """Find all comments, newest first."""
        comments = list(self._comments.values())
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Store a comment."""
        self._comments[comment.id] = comment
        return comment

    async def set_approved(self, comment_id: CommentId) -> Optional[Comment]:
        """Approve a comment (comments are immutable, so store a copy)."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        self._comments[comment_id] = comment.approve()
        return self._comments[comment_id]

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        self.delete_calls.append(comment_id)
        return self._comments.pop(comment_id, None) is not None
