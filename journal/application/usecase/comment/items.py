"""Comment items shared by comment and moderation responses.

Field names serialize in camelCase to match the record wire shape
(``postSlug``, ``createdAt``, ``parentId`` ...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from journal.domain.model import Comment
from journal.domain.thread import ThreadNode


class CommentItem(BaseModel):
    """Comment as sent to clients. ``email`` is only filled for moderators."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    post_slug: str
    author: str
    email: str | None = None
    content: str
    created_at: datetime
    approved: bool
    is_admin: bool
    parent_id: str | None
    mentioned_user: str | None

    @classmethod
    def from_domain(cls, comment: Comment, include_email: bool = False) -> "CommentItem":
        """Convert a domain comment.

        Args:
            comment: Domain comment
            include_email: Whether to expose the private email

        Returns:
            Comment item
        """
        return cls(
            id=str(comment.id),
            post_slug=str(comment.post_slug),
            author=str(comment.author),
            email=str(comment.email) if include_email and comment.email else None,
            content=comment.content,
            created_at=comment.created_at,
            approved=comment.approved,
            is_admin=comment.is_admin,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            mentioned_user=comment.mentioned_user,
        )


class CommentNodeItem(BaseModel):
    """Rendered thread node: a comment, its indentation depth and visible replies."""

    comment: CommentItem
    depth: int
    children: list["CommentNodeItem"]

    @classmethod
    def from_domain(
        cls, node: ThreadNode, include_email: bool = False
    ) -> "CommentNodeItem":
        """Convert a domain thread node, children included.

        Args:
            node: Domain thread node
            include_email: Whether to expose private emails

        Returns:
            Node item with children converted recursively. Depth is bounded
            by the reconciler, see ``MAX_RENDER_DEPTH``.
        """
        return cls(
            comment=CommentItem.from_domain(node.comment, include_email=include_email),
            depth=node.depth,
            children=[
                cls.from_domain(child, include_email=include_email)
                for child in node.children
            ],
        )
