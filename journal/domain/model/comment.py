"""Comment entity.

Comments are stored as flat records; threading is expressed only through
``parent_id`` and may nest to any depth. Trees are rebuilt on read by
``journal.domain.thread``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from journal.domain.model.common import DomainModel
from journal.domain.value import AuthorName, CommentId, Email, PostSlug
from journal.domain.value.types import MAX_CONTENT_LENGTH


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Only ``approved`` ever changes after creation; content and parentage
    are fixed. A reply's parent must belong to the same post.
    """

    id: CommentId
    post_slug: PostSlug
    author: AuthorName
    email: Optional[Email] = None  # Private, never rendered to visitors
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
    approved: bool = True
    is_admin: bool = False
    parent_id: Optional[CommentId] = None
    mentioned_user: Optional[str] = None  # Display only, renders "@name"

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment on the post."""
        return self.parent_id is None

    def approve(self) -> "Comment":
        """Return an approved copy of this comment."""
        return self.model_copy(update={"approved": True})
